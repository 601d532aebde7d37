"""
Pytest configuration and shared fixtures for stojson tests.

Provides immutable test case records and JSON_checker derived documents
for consistent test organization.
"""

from dataclasses import dataclass

import pytest

import stojson
from stojson import JsonArray
from stojson import JsonBoolean
from stojson import JsonFloat
from stojson import JsonInteger
from stojson import JsonNull
from stojson import JsonObject
from stojson import JsonString
from stojson import JsonValue


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    expected_error: type[stojson.ParseError] | None = None
    expected_output: JsonValue | None = None


# https://json.org/JSON_checker/test/failN.json documents this parser rejects
FAIL_CASES = [
    JsonTestCase(
        "fail2.json", '["Unclosed array"', stojson.UnexpectedEndOfInput
    ),
    JsonTestCase(
        "fail3.json",
        '{unquoted_key: "keys must be quoted"}',
        stojson.UnexpectedTokenCh,
    ),
    JsonTestCase("fail4.json", '["extra comma",]', stojson.UnexpectedTokenCh),
    JsonTestCase(
        "fail5.json", '["double extra comma",,]', stojson.UnexpectedTokenCh
    ),
    JsonTestCase(
        "fail6.json", '[   , "<-- missing value"]', stojson.UnexpectedTokenCh
    ),
    JsonTestCase(
        "fail7.json", '["Comma after the close"],', stojson.UnexpectedTokenCh
    ),
    JsonTestCase("fail8.json", '["Extra close"]]', stojson.UnexpectedTokenCh),
    JsonTestCase(
        "fail9.json", '{"Extra comma": true,}', stojson.UnexpectedTokenCh
    ),
    JsonTestCase(
        "fail10.json",
        '{"Extra value after close": true} "misplaced quoted value"',
        stojson.UnexpectedTokenCh,
    ),
    JsonTestCase(
        "fail11.json",
        '{"Illegal expression": 1 + 2}',
        stojson.UnexpectedTokenCh,
    ),
    JsonTestCase(
        "fail12.json",
        '{"Illegal invocation": alert()}',
        stojson.UnexpectedTokenCh,
    ),
    JsonTestCase(
        "fail13.json",
        '{"Numbers cannot have leading zeroes": 013}',
        stojson.IntegerWithLeadingZero,
    ),
    JsonTestCase(
        "fail14.json",
        '{"Numbers cannot be hex": 0x14}',
        stojson.UnexpectedTokenCh,
    ),
    JsonTestCase("fail16.json", "[\\naked]", stojson.UnexpectedTokenCh),
    JsonTestCase(
        "fail19.json", '{"Missing colon" null}', stojson.UnexpectedTokenCh
    ),
    JsonTestCase(
        "fail20.json", '{"Double colon":: null}', stojson.UnexpectedTokenCh
    ),
    JsonTestCase(
        "fail21.json",
        '{"Comma instead of colon", null}',
        stojson.UnexpectedTokenCh,
    ),
    JsonTestCase(
        "fail22.json",
        '["Colon instead of comma": false]',
        stojson.UnexpectedTokenCh,
    ),
    JsonTestCase("fail23.json", '["Bad value", truth]', stojson.UnexpectedToken),
    JsonTestCase("fail24.json", "['single quote']", stojson.UnexpectedTokenCh),
    JsonTestCase("fail29.json", "[0e]", stojson.UnexpectedTokenCh),
    JsonTestCase("fail30.json", "[0e+]", stojson.UnexpectedTokenCh),
    JsonTestCase("fail31.json", "[0e+-1]", stojson.UnexpectedTokenCh),
    JsonTestCase(
        "fail32.json",
        '{"Comma instead if closing brace": true,',
        stojson.UnexpectedEndOfInput,
    ),
    JsonTestCase("fail33.json", '["mismatch"}', stojson.UnexpectedTokenCh),
]

# JSON_checker failures that this grammar deliberately accepts: any
# character after a backslash is taken literally, control characters are
# kept inside strings, scalars are valid documents, and nesting is only
# bounded by max_depth.
LENIENT_CASES = [
    JsonTestCase(
        "fail1.json",
        '"A JSON payload should be an object or array, not a string."',
        expected_output=JsonString(
            "A JSON payload should be an object or array, not a string."
        ),
    ),
    JsonTestCase(
        "fail15.json",
        '["Illegal backslash escape: \\x15"]',
        expected_output=JsonArray(
            (JsonString("Illegal backslash escape: x15"),)
        ),
    ),
    JsonTestCase(
        "fail17.json",
        '["Illegal backslash escape: \\017"]',
        expected_output=JsonArray(
            (JsonString("Illegal backslash escape: 017"),)
        ),
    ),
    JsonTestCase(
        "fail18.json",
        '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
    ),
    JsonTestCase(
        "fail25.json",
        '["\ttab\tcharacter\tin\tstring\t"]',
        expected_output=JsonArray(
            (JsonString("\ttab\tcharacter\tin\tstring\t"),)
        ),
    ),
    JsonTestCase(
        "fail27.json",
        '["line\nbreak"]',
        expected_output=JsonArray((JsonString("line\nbreak"),)),
    ),
    JsonTestCase(
        "fail28.json",
        '["line\\\nbreak"]',
        expected_output=JsonArray((JsonString("line\nbreak"),)),
    ),
]


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing, with the expected error.
    """
    return FAIL_CASES


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.

    pass1.json is trimmed of exponents and \\u escapes, which this grammar
    does not decode.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    },
    0.5 ,98.6
,
99.44
,

1066
]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all seven value kinds and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", expected_output=JsonNull()),
        JsonTestCase("true boolean", "true", expected_output=JsonBoolean(True)),
        JsonTestCase(
            "false boolean", "false", expected_output=JsonBoolean(False)
        ),
        JsonTestCase("integer", "42", expected_output=JsonInteger(42)),
        JsonTestCase(
            "negative integer", "-17", expected_output=JsonInteger(-17)
        ),
        JsonTestCase("float", "3.14", expected_output=JsonFloat(3.14)),
        JsonTestCase("empty string", '""', expected_output=JsonString("")),
        JsonTestCase(
            "simple string", '"hello"', expected_output=JsonString("hello")
        ),
        JsonTestCase("empty array", "[]", expected_output=JsonArray()),
        JsonTestCase("empty object", "{}", expected_output=JsonObject()),
        JsonTestCase(
            "simple array",
            "[1, 2, 3]",
            expected_output=JsonArray(
                (JsonInteger(1), JsonInteger(2), JsonInteger(3))
            ),
        ),
        JsonTestCase(
            "simple object",
            '{"key": "value"}',
            expected_output=JsonObject({"key": JsonString("value")}),
        ),
    ]
