import sys
from io import BytesIO
from typing import Optional

import atheris
from fuzz_utils import EnhancedFuzzedDataProvider, is_expected_exception

with atheris.instrument_imports():
    from gitconf import ParseError, load, parse


def TestOneInput(data) -> Optional[int]:
    fdp = EnhancedFuzzedDataProvider(data)
    text = fdp.ConsumeRandomString()
    result = parse(text)
    if result.lineno < 1:
        raise AssertionError(f"bad line number {result.lineno}")
    if result.error is not None and result.error.config is not result.config:
        raise AssertionError("error does not carry the partial config")

    try:
        load(BytesIO(fdp.ConsumeRemainingBytes()))
    except ParseError as e:
        expected_exceptions = [
            "invalid key character",
            "unexpected end of file",
            "invalid section name character",
            "section header cannot contain a new line",
            "missing start quote",
            "missing closing bracket",
            "invalid escape sequence",
            "missing end quote",
        ]
        if is_expected_exception(expected_exceptions, e):
            return -1
        else:
            raise e


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
