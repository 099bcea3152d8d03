"""
Exception classes for Monty Hall Simulator
"""

from typing import Sequence


class MontyHallSimulatorError(Exception):
    """シミュレータの基底例外クラス"""
    pass


class InvalidArgumentError(MontyHallSimulatorError, ValueError):
    """引数の事前条件違反"""
    pass


class InvalidDoorError(InvalidArgumentError):
    """ドア番号が不正"""
    def __init__(self, position: object, message: str | None = None) -> None:
        self.position = position
        super().__init__(
            message or f"ドア番号は1〜3である必要があります: {position!r}"
        )


class InvalidArrangementError(InvalidArgumentError):
    """配置がcar 1つ・goat 2つになっていない"""
    def __init__(self, contents: Sequence[object]) -> None:
        self.contents = tuple(contents)
        super().__init__(
            "配置はcar 1つとgoat 2つの3要素である必要があります: "
            f"{list(self.contents)}"
        )


class ConfigurationError(InvalidArgumentError):
    """設定パラメータに関するエラー"""
    pass
