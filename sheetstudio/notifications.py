"""User-facing messages shown after uploads and exports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

DEFAULT_VARIANT = "default"
DESTRUCTIVE_VARIANT = "destructive"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = DEFAULT_VARIANT

    @property
    def is_error(self) -> bool:
        return self.variant == DESTRUCTIVE_VARIANT


def upload_succeeded(file_name: str) -> Notification:
    return Notification("Файл загружен", f"{file_name} успешно импортирован")


def upload_failed() -> Notification:
    return Notification("Ошибка", "Не удалось загрузить файл", DESTRUCTIVE_VARIANT)


def format_rejected(extensions: Iterable[str]) -> Notification:
    listed = " или ".join(extensions)
    return Notification(
        "Неверный формат",
        f"Пожалуйста, загрузите файл Excel ({listed})",
        DESTRUCTIVE_VARIANT,
    )


def export_succeeded() -> Notification:
    return Notification("Экспорт завершён", "Файл успешно сохранён")


__all__ = [
    "DEFAULT_VARIANT",
    "DESTRUCTIVE_VARIANT",
    "Notification",
    "export_succeeded",
    "format_rejected",
    "upload_failed",
    "upload_succeeded",
]
