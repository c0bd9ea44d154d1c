import pytest

import random
import string

from treepatch import diff


def random_string(N):
    return ''.join(random.choice(
        string.ascii_uppercase + string.digits) for _ in range(N))


def random_records(n):
    return [
        {"id": i, "name": random_string(12), "tags": [random_string(4) for _ in range(5)]}
        for i in range(n)
    ]


@pytest.mark.timeout(timeout=20)
def test_wide_array_performance(slow):
    # Seeded random content, only interested in performance not blowing up
    random.seed(0)
    base = {"records": random_records(5000)}
    remote = {"records": random_records(4000)}

    patch = diff(base, remote)
    removes = [e for e in patch if e["op"] == "remove"]
    assert len(removes) == 1000
    assert removes[0]["path"] == "/records/4999"


@pytest.mark.timeout(timeout=20)
def test_deep_chain_performance(slow):
    # Every level carries a wide sibling, so re-serializing subtrees
    # per ancestor would be quadratic in the total size
    a = b = None
    for i in range(250):
        a = {"n": a, "data": list(range(200))}
        b = {"n": b, "data": list(range(200))}
    b["data"] = list(range(201))
    node = b
    for _ in range(249):
        node = node["n"]
    node["data"][0] = -1

    patch = diff(a, b)
    assert patch == [
        {"op": "replace", "path": "/n" * 249 + "/data/0", "value": -1},
        {"op": "add", "path": "/data/-", "value": 200},
    ]
