from smg.heap import Heap


class Person:
    def __init__(self, name: str, birthyear: int):
        self.name = name            # type: str
        self.birthyear = birthyear  # type: int

    def __repr__(self) -> str:
        return "{}({})".format(self.name, self.birthyear)


def main():
    # A max-heap of people, ordered by birth year.
    heap: Heap[Person] = Heap[Person](comparator=lambda a, b: a.birthyear - b.birthyear)
    for name, birthyear in [("John", 1981), ("Pavlo", 2000), ("Garry", 1989), ("Derek", 1990), ("Ivan", 1966)]:
        heap.add(Person(name, birthyear))

    while not heap.is_empty():
        print(heap.extract())


if __name__ == "__main__":
    main()
