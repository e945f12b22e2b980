import pytest

from app.domain.pagination import (
    ELLIPSIS,
    Paginator,
    ServerPaginator,
    item_range,
    page_numbers,
    total_pages_for,
)


# ============================================================================
# CLIENT-SIDE PAGINATION
# ============================================================================


def test_twenty_five_items_split_into_three_pages():
    paginator = Paginator(range(1, 26), page_size=10)

    assert paginator.total_pages == 3
    assert paginator.total_items == 25
    assert paginator.current_page == 1
    assert paginator.paginated_data == list(range(1, 11))

    paginator.next_page()
    assert paginator.paginated_data == list(range(11, 21))

    paginator.next_page()
    assert paginator.paginated_data == [21, 22, 23, 24, 25]


def test_empty_collection_reports_one_page():
    paginator = Paginator([], page_size=10)

    assert paginator.total_pages == 1
    assert paginator.current_page == 1
    assert paginator.paginated_data == []


def test_default_page_size_is_ten():
    paginator = Paginator(range(30))
    assert paginator.page_size == 10
    assert paginator.total_pages == 3


@pytest.mark.parametrize("length", [0, 1, 9, 10, 11, 25, 100, 101])
@pytest.mark.parametrize("page_size", [1, 3, 10, 50])
def test_pages_are_full_except_possibly_the_last(length, page_size):
    paginator = Paginator(range(length), page_size=page_size)

    assert paginator.total_pages == max(1, -(-length // page_size))

    seen = []
    for page in range(1, paginator.total_pages + 1):
        paginator.set_page(page)
        data = paginator.paginated_data
        assert len(data) <= page_size
        if page < paginator.total_pages:
            assert len(data) == page_size
        seen.extend(data)
    assert seen == list(range(length))


@pytest.mark.parametrize("requested", [-100, -1, 0, 1, 2, 3, 4, 999])
def test_set_page_is_clamped_into_range(requested):
    paginator = Paginator(range(25), page_size=10)
    paginator.set_page(requested)
    assert 1 <= paginator.current_page <= paginator.total_pages
    assert paginator.current_page == max(1, min(requested, 3))


def test_set_page_size_resets_to_first_page():
    paginator = Paginator(range(100), page_size=10)
    paginator.set_page(7)

    paginator.set_page_size(20)

    assert paginator.current_page == 1
    assert paginator.page_size == 20
    assert paginator.total_pages == 5
    assert paginator.paginated_data == list(range(20))


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_page_size_is_clamped_to_one(size):
    paginator = Paginator(range(3), page_size=10)
    paginator.set_page_size(size)

    assert paginator.page_size == 1
    assert paginator.total_pages == 3
    assert paginator.paginated_data == [0]


def test_non_positive_initial_page_size_is_clamped():
    paginator = Paginator(range(3), page_size=0)
    assert paginator.page_size == 1


def test_last_then_next_is_a_no_op():
    paginator = Paginator(range(25), page_size=10)
    paginator.go_to_last_page()
    assert paginator.current_page == 3

    paginator.next_page()
    assert paginator.current_page == 3


def test_previous_on_first_page_is_a_no_op():
    paginator = Paginator(range(25), page_size=10)
    paginator.previous_page()
    assert paginator.current_page == 1


def test_go_to_first_page():
    paginator = Paginator(range(25), page_size=10)
    paginator.go_to_last_page()
    paginator.go_to_first_page()
    assert paginator.current_page == 1


def test_shrinking_items_clamps_current_page():
    paginator = Paginator(range(50), page_size=10)
    paginator.go_to_last_page()
    assert paginator.current_page == 5

    paginator.set_items(range(15))

    assert paginator.current_page == 2
    assert paginator.paginated_data == list(range(10, 15))


def test_emptying_items_falls_back_to_page_one():
    paginator = Paginator(range(50), page_size=10)
    paginator.set_page(4)

    paginator.set_items([])

    assert paginator.current_page == 1
    assert paginator.paginated_data == []


def test_source_sequence_is_not_mutated_or_aliased():
    source = [1, 2, 3, 4, 5]
    paginator = Paginator(source, page_size=2)

    page = paginator.paginated_data
    page.append(99)
    source.clear()

    assert paginator.total_items == 5
    assert paginator.paginated_data == [1, 2]


def test_initial_page_is_clamped():
    paginator = Paginator(range(25), page_size=10, initial_page=40)
    assert paginator.current_page == 3


def test_item_range_and_pages_follow_state():
    paginator = Paginator(range(25), page_size=10)
    paginator.set_page(3)

    assert paginator.item_range == (21, 25)
    assert paginator.pages == [1, 2, 3]


# ============================================================================
# SERVER-SIDE PAGINATION
# ============================================================================


def test_server_offset_and_limit():
    paginator = ServerPaginator(total_items=95, page_size=20)
    paginator.set_page(5)

    assert paginator.total_pages == 5
    assert paginator.current_page == 5
    assert paginator.offset == 80
    assert paginator.limit == 20


def test_server_set_page_clamps_against_reported_total():
    paginator = ServerPaginator(total_items=95, page_size=20)

    paginator.set_page(12)
    assert paginator.current_page == 5

    paginator.set_page(-3)
    assert paginator.current_page == 1
    assert paginator.offset == 0


def test_server_zero_total_is_one_page():
    paginator = ServerPaginator(total_items=0)

    assert paginator.total_pages == 1
    assert paginator.offset == 0
    assert paginator.limit == 10


def test_server_set_page_size_resets_page():
    paginator = ServerPaginator(total_items=95, page_size=20, initial_page=4)
    assert paginator.offset == 60

    paginator.set_page_size(50)

    assert paginator.current_page == 1
    assert paginator.offset == 0
    assert paginator.limit == 50
    assert paginator.total_pages == 2


def test_server_shrinking_total_clamps_page():
    paginator = ServerPaginator(total_items=95, page_size=20, initial_page=5)

    paginator.set_total_items(30)

    assert paginator.current_page == 2
    assert paginator.offset == 20


def test_server_negative_total_is_treated_as_empty():
    paginator = ServerPaginator(total_items=-4)
    assert paginator.total_items == 0
    assert paginator.total_pages == 1


def test_server_navigation_helpers():
    paginator = ServerPaginator(total_items=45, page_size=10)
    paginator.go_to_last_page()
    assert paginator.current_page == 5
    paginator.next_page()
    assert paginator.current_page == 5
    paginator.previous_page()
    assert paginator.current_page == 4
    paginator.go_to_first_page()
    assert paginator.offset == 0


# ============================================================================
# HELPERS
# ============================================================================


@pytest.mark.parametrize(
    "total_items,page_size,expected",
    [(0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (95, 20, 5), (5, 0, 5)],
)
def test_total_pages_for(total_items, page_size, expected):
    assert total_pages_for(total_items, page_size) == expected


def test_page_numbers_lists_all_pages_when_few():
    assert page_numbers(1, 5) == [1, 2, 3, 4, 5]
    assert page_numbers(4, 7) == [1, 2, 3, 4, 5, 6, 7]


def test_page_numbers_near_start():
    assert page_numbers(1, 20) == [1, 2, ELLIPSIS, 20]
    assert page_numbers(3, 20) == [1, 2, 3, 4, ELLIPSIS, 20]


def test_page_numbers_in_the_middle():
    assert page_numbers(10, 20) == [1, ELLIPSIS, 9, 10, 11, ELLIPSIS, 20]


def test_page_numbers_near_end():
    assert page_numbers(18, 20) == [1, ELLIPSIS, 17, 18, 19, 20]
    assert page_numbers(20, 20) == [1, ELLIPSIS, 19, 20]


def test_item_range():
    assert item_range(1, 10, 25) == (1, 10)
    assert item_range(3, 10, 25) == (21, 25)
    assert item_range(1, 10, 0) == (0, 0)
