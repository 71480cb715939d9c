"""Positional names shared by the class file and the test file.

Both generators build every type and method name through these helpers so the
two outputs agree on numbering and slot order.
"""

WRAPPER_TYPE = "Results"
RESULT_INTERFACE = "IResult"
METADATA_PROVIDER_INTERFACE = "IEndpointMetadataProvider"
RECORDING_FIXTURE_BASE = "RecordingFixture"
METADATA_FIXTURE_BASE = "MetadataFixture"


def type_param(slot: int) -> str:
    """Type parameter name for a slot, e.g. ``TResult2``."""
    return f"TResult{slot}"


def type_params(arity: int) -> list[str]:
    """Ordered type parameter names for an arity."""
    return [type_param(j) for j in range(1, arity + 1)]


def generic_type(type_args: list[str]) -> str:
    """Close the wrapper type over the given arguments, e.g. ``Results<A, B>``."""
    return f"{WRAPPER_TYPE}<{', '.join(type_args)}>"


def doc_cref_type(arity: int) -> str:
    """Wrapper type as written inside a doc-comment cref, e.g. ``Results{TResult1, TResult2}``."""
    return f"{WRAPPER_TYPE}{{{', '.join(type_params(arity))}}}"


def method_prefix(arity: int) -> str:
    """Test method prefix for an arity, e.g. ``ResultsOfTResult1TResult2``."""
    return f"{WRAPPER_TYPE}Of{''.join(type_params(arity))}"


def recording_fixture(index: int) -> str:
    return f"{RECORDING_FIXTURE_BASE}{index}"


def metadata_fixture(index: int) -> str:
    return f"{METADATA_FIXTURE_BASE}{index}"


def recording_fixtures(arity: int) -> list[str]:
    return [recording_fixture(j) for j in range(1, arity + 1)]


def metadata_fixtures(arity: int) -> list[str]:
    return [metadata_fixture(j) for j in range(1, arity + 1)]
