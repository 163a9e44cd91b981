"""Sample logical identifiers and substitutes shared by the tests."""

from __future__ import annotations


class Logger:
    """Default logger implementation."""

    @staticmethod
    def log(message: str) -> str:
        return f"log: {message}"


class FakeLogger:
    """Logger substitute for tests."""

    @staticmethod
    def log(message: str) -> str:
        return f"fake: {message}"


class Sensor:
    """Default sensor implementation."""

    @staticmethod
    def read() -> float:
        return 21.5


class MockSensor:
    """Sensor substitute fixed at startup."""

    @staticmethod
    def read() -> float:
        return 0.0


class OtherMock:
    """Sensor substitute attempted at run time."""

    @staticmethod
    def read() -> float:
        return -1.0
