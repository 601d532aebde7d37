"""
Test data generators for JSON parsing benchmarks.

Every document stays inside the grammar stojson decodes: no exponents and
no \\u escapes, so all parsers in the comparison see identical input.
"""

import json
import random
import string
from typing import Any

_SEED = 20240115
_ESCAPES = ['\\"', "\\\\", "\\n", "\\r", "\\t"]
_ESCAPE_PROBABILITY = 0.25


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "status_payload": _generate_status_payload,
        "record_batch": _generate_record_batch,
        "number_array": _generate_number_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    # Fixed seed so repeated runs compare the same documents
    rng = random.Random(_SEED)
    return generators[data_type](rng)


def _generate_status_payload(rng: random.Random) -> str:
    """Generates a launcher-style status document (< 1KB)."""
    data = {
        "server_status": rng.choice(["up", "down"]),
        "shards": [
            {"name": _random_string(rng, 8), "population": rng.randint(0, 5000)}
            for _ in range(4)
        ],
        "message": "Scheduled maintenance\nat 10:00 UTC",
        "version": 3,
    }
    return json.dumps(data, indent=2)


def _generate_record_batch(rng: random.Random) -> str:
    """Generates an object holding a few hundred flat records (> 10KB)."""
    data = {
        "batch": rng.randint(1000000, 9999999),
        "records": [
            {
                "id": f"rec_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "count": rng.randint(0, 1000),
                "tag": rng.choice(["alpha", "beta", "gamma"]),
                "active": rng.random() < 0.5,
                "note": None,
            }
            for i in range(200)
        ],
    }
    return json.dumps(data)


def _generate_number_array(rng: random.Random) -> str:
    """Generates an array mixing integers and fixed-point floats."""
    numbers: list[int | float] = []
    for _ in range(1000):
        if rng.random() < 0.5:
            numbers.append(rng.randint(-(2**40), 2**40))
        else:
            numbers.append(round(rng.uniform(-1000.0, 1000.0), 3))
    return json.dumps(numbers)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a tree six levels deep with three children per node."""

    def node(depth: int) -> dict[str, Any]:
        if depth == 0:
            return {"leaf": _random_string(rng, 10)}
        return {
            "depth": depth,
            "children": [node(depth - 1) for _ in range(3)],
        }

    return json.dumps(node(6))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates JSON whose strings are dense with escape sequences."""

    def escaped_string() -> str:
        # json.dumps escapes the backslashes again, so the document holds
        # both the escape and the escaped backslash.
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPES))
            else:
                chars.append(rng.choice(string.ascii_letters + " "))
        return "".join(chars)

    data = {
        "strings": [escaped_string() for _ in range(100)],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_random_string(rng, 8)}\\file_{i}.txt"
            for i in range(20)
        },
    }
    return json.dumps(data)


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
