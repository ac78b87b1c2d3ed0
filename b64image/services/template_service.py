"""Шаблоны вывода для каждого режима кода редактора.

Принципы:
- SRP: только форматирование готовых данных, без кодирования и ввода-вывода.
- OCP: закрытая таблица `контекст -> функция`; новый режим = новая строка таблицы.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict

from b64image.models.image_model import CodeContext, Dimensions

EOL = "\n"

_DATA_URI_PREFIX = re.compile(r"^data:image/.*;base64,")


@dataclass(frozen=True)
class SnippetParts:
    data_uri: str
    stripped_data_uri: str
    name: str
    dimensions: Dimensions


def _comment_text(p: SnippetParts) -> str:
    return f"{p.name}, width: {p.dimensions.width}px, height: {p.dimensions.height}px"


def _plain(p: SnippetParts) -> str:
    return f'"{p.data_uri}"' + EOL


def _stylesheet(p: SnippetParts) -> str:
    return EOL.join([
        f"background-image: url('{p.data_uri}'); /* {p.name} */",
        "/*",
        f"width: {p.dimensions.width}px;",
        f"height: {p.dimensions.height}px;",
        "*/",
    ]) + EOL


def _markup(p: SnippetParts) -> str:
    return (
        f'<img src="{p.data_uri}" width="{p.dimensions.width}" '
        f'height="{p.dimensions.height}" alt="{p.name}" />' + EOL
    )


def _script(p: SnippetParts) -> str:
    # JS-строка не может содержать переводы строк
    return f"// {_comment_text(p)}" + EOL + f"var imageData = '{p.stripped_data_uri}';" + EOL


def _php(p: SnippetParts) -> str:
    return f"// {_comment_text(p)}" + EOL + f"$imageData = '{p.data_uri}';" + EOL


def _asp(p: SnippetParts) -> str:
    return f"/* {_comment_text(p)} */" + EOL + f'imageData = "{p.data_uri}"' + EOL


def _markup_data(p: SnippetParts) -> str:
    body = _DATA_URI_PREFIX.sub("", p.data_uri)
    return f'<image encoding="base64">{body}</image>' + EOL


_TEMPLATES: Dict[CodeContext, Callable[[SnippetParts], str]] = {
    CodeContext.PLAIN: _plain,
    CodeContext.STYLESHEET: _stylesheet,
    CodeContext.MARKUP: _markup,
    CodeContext.SCRIPT: _script,
    CodeContext.PHP: _php,
    CodeContext.ASP: _asp,
    CodeContext.MARKUP_DATA: _markup_data,
}


class TemplateService:
    def render(
        self,
        context: CodeContext,
        data_uri: str,
        stripped_data_uri: str,
        name: str,
        dimensions: Dimensions,
        wrap: bool = True,
    ) -> str:
        """Рендерит фрагмент кода для режима `context`.

        Args:
            context: Режим кода активного редактора.
            data_uri: Data URI (с переносами строк или без, по настройке).
            stripped_data_uri: Тот же data URI без переносов строк.
            name: Имя файла для комментария или `alt`.
            dimensions: Ширина и высота; пустые для SVG.
            wrap: Если False, всегда выводится data URI в кавычках.

        Returns:
            Готовый к вставке текст, завершённый переводом строки.
        """
        parts = SnippetParts(
            data_uri=data_uri,
            stripped_data_uri=stripped_data_uri,
            name=name,
            dimensions=dimensions,
        )
        if not wrap:
            return _plain(parts)
        return _TEMPLATES[context](parts)
