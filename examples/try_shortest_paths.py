from typing import Dict, List, Tuple

from smg.heap import Heap, min_order


class Vertex:
    def __init__(self, name: str):
        self.name = name                # type: str
        self.distance = float("inf")    # type: float

    def __repr__(self) -> str:
        return "{}: {}".format(self.name, self.distance)


def shortest_paths(edges: Dict[str, List[Tuple[str, float]]], source: str) -> Dict[str, float]:
    vertices = {name: Vertex(name) for name in edges}  # type: Dict[str, Vertex]
    vertices[source].distance = 0.0

    # A min-heap of vertices, ordered by their current distances from the source.
    heap = Heap[Vertex](comparator=lambda a, b: min_order(a.distance, b.distance), ident=lambda v: v.name)
    for v in vertices.values():
        heap.add(v)

    while not heap.is_empty():
        u = heap.extract()  # type: Vertex
        for name, weight in edges[u.name]:
            v = vertices[name]  # type: Vertex
            if heap.contains(v) and u.distance + weight < v.distance:
                # Relax the edge, and then let the heap know that the vertex's priority has increased.
                v.distance = u.distance + weight
                heap.update(v)

    return {name: v.distance for name, v in vertices.items()}


def main():
    edges = {
        "a": [("b", 7.0), ("c", 9.0), ("f", 14.0)],
        "b": [("a", 7.0), ("c", 10.0), ("d", 15.0)],
        "c": [("a", 9.0), ("b", 10.0), ("d", 11.0), ("f", 2.0)],
        "d": [("b", 15.0), ("c", 11.0), ("e", 6.0)],
        "e": [("d", 6.0), ("f", 9.0)],
        "f": [("a", 14.0), ("c", 2.0), ("e", 9.0)]
    }
    print(shortest_paths(edges, "a"))


if __name__ == "__main__":
    main()
