"""
Partition / reconstruct tests
"""

from pricing_admin.domain.partition import Bucket, partition, reconstruct


def buckets():
    return [
        Bucket("even", lambda n: n % 2 == 0, lambda n: n * 10, lambda: [0]),
        Bucket("negative", lambda n: n < 0, str, lambda: ["none"]),
    ]


def test_partition_keeps_input_order():
    result = partition([4, 1, 2, 8], buckets())

    assert result["even"] == [40, 20, 80]


def test_empty_bucket_gets_default():
    result = partition([2, 4], buckets())

    assert result["negative"] == ["none"]


def test_record_may_match_several_buckets():
    result = partition([-2, 3], buckets())

    assert result["even"] == [-20]
    assert result["negative"] == ["-2"]


def test_default_is_fresh_each_time():
    first = partition([], buckets())
    first["even"].append(99)

    assert partition([], buckets())["even"] == [0]


def test_reconstruct_drops_none():
    rows = reconstruct([[1, 2, 3], ["a", ""]], [lambda n: n if n != 2 else None, lambda s: s or None])

    assert rows == [1, 3, "a"]
