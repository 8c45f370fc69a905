from concurrent.futures import ThreadPoolExecutor

from fit_coach.ids import CounterIdAllocator


def test_ids_share_one_counter():
    a = CounterIdAllocator()
    assert [a.next_id("wo"), a.next_id("wo"), a.next_id("plan")] == ["wo_1", "wo_2", "plan_3"]


def test_reset_reseeds():
    a = CounterIdAllocator()
    a.next_id("wo")
    a.reset()
    assert a.next_id("wo") == "wo_1"
    a.reset(start=42)
    assert a.next_id("plan") == "plan_42"


def test_ids_unique_across_threads():
    a = CounterIdAllocator()
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: a.next_id("wo"), range(2000)))
    assert len(set(ids)) == 2000
