"""HTML presentation of a classified reading."""
from __future__ import annotations

from typing import Iterable

from markupsafe import Markup

from reading_fluency.models.alignment import RenderedWord, WordStatus

_CSS_CLASS = {
    WordStatus.CORRECT: "ok",
    WordStatus.SAID_DIFFERENTLY: "sub",
    WordStatus.MISSED: "del",
    WordStatus.EXTRA: "ins",
}


def _span(word: RenderedWord) -> Markup:
    css = _CSS_CLASS[word.status]
    if word.status is WordStatus.CORRECT:
        return Markup('<span class="w {}">{}</span>').format(css, word.word)
    if word.status is WordStatus.SAID_DIFFERENTLY:
        title = "said: " + (word.spoken or "")
    else:
        title = word.status.value
    return Markup('<span class="w {}" title="{}">{}</span>').format(css, title, word.word)


def render_detail_html(words: Iterable[RenderedWord]) -> str:
    """Render classified words as the diff markup shown on the teacher dashboard.

    Example: [correct "the", said-differently "cat"/"dog"] ->
        <div class="diff"><span class="w ok">the</span> <span class="w sub" title="said: dog">cat</span></div>
    """
    body = Markup(" ").join(_span(w) for w in words)
    return str(Markup('<div class="diff">{}</div>').format(body))
