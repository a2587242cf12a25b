from puzzlekit.containers import NumberContainers, ProductOfNumbers, query_results


def test_query_results_example():
    assert query_results(4, [[1, 4], [2, 5], [1, 3], [3, 4]]) == [1, 2, 2, 3]


def test_query_results_new_colors_each_time():
    queries = [[ball, ball + 10] for ball in range(1, 6)]
    assert query_results(5, queries) == list(range(1, len(queries) + 1))


def test_query_results_recolouring_one_ball():
    queries = [[7, color] for color in (1, 2, 3, 2, 1)]
    assert query_results(10, queries) == [1] * len(queries)


def test_query_results_large_limit():
    queries = [[10**9, 1], [1, 1]]
    assert query_results(10**9, queries) == [1, 1]


def test_number_containers_missing():
    containers = NumberContainers()
    assert containers.find(10) == -1


def test_number_containers_smallest_index():
    containers = NumberContainers()
    for index in (2, 1, 3, 5):
        containers.change(index, 10)
    assert containers.find(10) == 1


def test_number_containers_replacement():
    containers = NumberContainers()
    for index in (2, 1, 3, 5):
        containers.change(index, 10)
    containers.change(1, 20)
    assert containers.find(10) == 2
    assert containers.find(20) == 1


def test_number_containers_move_back():
    containers = NumberContainers()
    containers.change(4, 7)
    containers.change(4, 8)
    assert containers.find(7) == -1
    containers.change(4, 7)
    assert containers.find(7) == 4
    assert containers.find(8) == -1


def test_product_of_numbers_example():
    stream = ProductOfNumbers()
    for value in (3, 0, 2, 5, 4):
        stream.add(value)
    assert stream.get_product(2) == 20
    assert stream.get_product(3) == 40
    assert stream.get_product(4) == 0


def test_product_of_numbers_last_value():
    stream = ProductOfNumbers()
    for value in (3, 0, 2, 5, 4, 8):
        stream.add(value)
    assert stream.get_product(1) == 8


def test_product_of_numbers_zero_resets():
    stream = ProductOfNumbers()
    stream.add(6)
    stream.add(0)
    assert stream.get_product(1) == 0
    stream.add(9)
    assert stream.get_product(1) == 9
    assert stream.get_product(2) == 0