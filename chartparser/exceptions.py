"""Exceptions raised while parsing chart text."""


class ChartParserError(Exception):
    """Base class for chart parsing failures.

    Attributes:
        text: The offending text.
    """

    def __init__(self, message: str, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text


class NoRaceDistanceFound(ChartParserError):
    """No valid distance/surface/track record block was found."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Unable to identify a valid race distance, surface, and/or track record: {text}",
            text,
        )


class UnrecognizedDistanceGrammar(ChartParserError):
    """A distance phrase matched none of the supported grammars."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unable to parse race distance from text: {text}", text)


class UnknownFractionalDenominator(ChartParserError):
    """A fractional mile/furlong used an unsupported denominator word."""

    def __init__(self, denominator: str, unit: str, text: str | None = None) -> None:
        super().__init__(
            f"Unable to parse a fractional {unit} denominator from text: {denominator}",
            text,
        )
        self.denominator = denominator
        self.unit = unit


class InvalidRaceDate(ChartParserError, ValueError):
    """A race date string could not be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date string: {text}", text)
