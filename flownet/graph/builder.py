"""Builder for converting a NetworkModel to a Graph."""

from ..schema.errors import SchemaValidationError
from ..schema.models import NetworkModel
from .errors import GraphError
from .graph import Graph


def build_graph(model: NetworkModel) -> Graph:
    """Build a Graph from a NetworkModel.

    Args:
        model: The parsed network description.

    Returns:
        A Graph with one vertex per id and one edge per edge entry.

    Raises:
        SchemaValidationError: If an edge violates the capacity/flow bound.
    """
    graph = Graph()
    graph.get_attribute_bag().set_attributes(model.attributes)
    if model.name:
        graph.set_attribute("name", model.name)

    # Declared vertices keep their attributes, endpoints are created bare
    declared = {vertex.id: vertex for vertex in model.vertices}
    for vertex_id in model.get_vertex_ids():
        vertex = graph.create_vertex(vertex_id)
        if vertex_id in declared:
            vertex.get_attribute_bag().set_attributes(declared[vertex_id].attributes)

    errors = []
    for index, edge_spec in enumerate(model.edges):
        start = graph.get_vertex(edge_spec.from_vertex)
        target = graph.get_vertex(edge_spec.to)
        if edge_spec.directed:
            edge = start.create_edge_to(target)
        else:
            edge = start.create_edge(target)

        try:
            edge.set_weight(edge_spec.weight)
            edge.set_capacity_and_flow(edge_spec.capacity, edge_spec.flow)
        except GraphError as e:
            edge.destroy()
            errors.append({"loc": f"edges.{index}", "msg": str(e), "type": "edge"})
            continue

        edge.get_attribute_bag().set_attributes(edge_spec.attributes)

    if errors:
        raise SchemaValidationError(
            f"Network has {len(errors)} invalid edge(s)", errors
        )

    return graph
