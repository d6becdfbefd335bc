"""Ошибки конвертации и результат операции.

Каждый вид ошибки соответствует стадии конвейера и хранит исходную
причину (`cause`) для диагностики.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from grayconv.models.image_model import GrayscaleImage, SourceImage


class ErrorKind(str, Enum):
    OPEN_FAILED = "open_failed"
    UNSUPPORTED_INPUT_FORMAT = "unsupported_input_format"
    DECODE_FAILED = "decode_failed"
    CREATE_FAILED = "create_failed"
    UNSUPPORTED_OUTPUT_FORMAT = "unsupported_output_format"
    ENCODE_FAILED = "encode_failed"


class ConversionError(Exception):
    """Базовая ошибка конвертации.

    Attributes:
        kind: Стадия, на которой произошёл сбой.
        path: Путь, к которому относится ошибка (входной или выходной файл).
        cause: Исключение нижнего уровня, если оно было.
    """
    kind: ErrorKind

    def __init__(self, message: str, path: str | Path, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = Path(path)
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message}: {self.cause}"
        return message


class OpenFailedError(ConversionError):
    kind = ErrorKind.OPEN_FAILED


class UnsupportedInputFormatError(ConversionError):
    kind = ErrorKind.UNSUPPORTED_INPUT_FORMAT


class DecodeFailedError(ConversionError):
    kind = ErrorKind.DECODE_FAILED


class CreateFailedError(ConversionError):
    kind = ErrorKind.CREATE_FAILED


class UnsupportedOutputFormatError(ConversionError):
    kind = ErrorKind.UNSUPPORTED_OUTPUT_FORMAT


class EncodeFailedError(ConversionError):
    kind = ErrorKind.ENCODE_FAILED


@dataclass(frozen=True)
class ConversionResult:
    """Итог конвертации: либо изображение и путь результата, либо ошибка.

    Fields:
        output_path: Путь, по которому записывался результат.
        source: Декодированный исходник (только при успехе).
        image: Полученное изображение (только при успехе).
        error: Ошибка конвертации (только при неудаче).
    """
    output_path: Path
    source: Optional[SourceImage] = None
    image: Optional[GrayscaleImage] = None
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
