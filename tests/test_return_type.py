import inspect
import typing

import pytest

from clust.tools.return_type import ReturnType


class SampleError(Exception):
    pass


def test_no_return_value():
    assert ReturnType.from_annotation(None) is ReturnType.NONE
    assert ReturnType.from_annotation(type(None)) is ReturnType.NONE
    assert ReturnType.from_annotation("None") is ReturnType.NONE


@pytest.mark.parametrize(
    "annotation",
    [int | SampleError, typing.Union[int, SampleError], typing.Union[str, ValueError, None]],
)
def test_result(annotation):
    assert ReturnType.from_annotation(annotation) is ReturnType.RESULT


def test_exception_alone_is_result():
    assert ReturnType.from_annotation(SampleError) is ReturnType.RESULT


@pytest.mark.parametrize(
    "annotation",
    [int, str, list[int], typing.Optional[int], int | str, "int"],
)
def test_value(annotation):
    assert ReturnType.from_annotation(annotation) is ReturnType.VALUE


def test_missing_annotation_is_value():
    assert ReturnType.from_annotation(inspect.Parameter.empty) is ReturnType.VALUE


def test_from_function_annotations():
    def returns_nothing(arg1: int) -> None:
        pass

    def returns_result(arg1: int) -> int | SampleError:
        return arg1

    assert (
        ReturnType.from_annotation(returns_nothing.__annotations__["return"])
        is ReturnType.NONE
    )
    assert (
        ReturnType.from_annotation(returns_result.__annotations__["return"])
        is ReturnType.RESULT
    )


def test_annotated_is_unwrapped():
    annotation = typing.Annotated[int | SampleError, "meta"]
    assert ReturnType.from_annotation(annotation) is ReturnType.RESULT