from pageloader.exceptions import (
    ArgumentErrorKind,
    PageLoaderArgumentError,
    PageLoaderException,
    WrongTypeError,
)


def test_wrong_type_message_and_fields():
    error = PageLoaderArgumentError.on_wrong_type("hasClass")
    assert error.kind is ArgumentErrorKind.WRONG_TYPE
    assert error.operation == "hasClass"
    assert str(error) == "'hasClass' may only be called on PageObjects or PageLoaderElements"


def test_non_existing_message_and_fields():
    error = PageLoaderArgumentError.on_non_existing("getInnerText")
    assert error.kind is ArgumentErrorKind.NON_EXISTING
    assert error.operation == "getInnerText"
    assert str(error) == (
        "'getInnerText' is being called on a non-existent PageObject or "
        "PageLoaderElement. If this is intentional, use 'exists' instead."
    )


def test_argument_errors_are_distinct_from_lookup_failures():
    error = WrongTypeError.on_wrong_type("exists/notExists")
    assert isinstance(error, ValueError)
    assert not isinstance(error, PageLoaderException)
    assert not issubclass(PageLoaderException, PageLoaderArgumentError)
