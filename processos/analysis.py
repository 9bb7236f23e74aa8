"""Queries over lists of court case records."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable

from .records import Processo, strip_braces, strip_quotes

_DATE_RE = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")


def _tokens(text: str) -> list[str]:
    return [token for token in strip_braces(text).split(",") if token]


def sort_by_id(processos: Iterable[Processo]) -> list[Processo]:
    """Return the records in ascending id order, keeping ties in place."""
    return sorted(processos, key=lambda p: p.id)


def sort_by_date(processos: Iterable[Processo]) -> list[Processo]:
    """Return the records newest filing date first, keeping ties in place."""
    return sorted(processos, key=lambda p: p.data_ajuizamento, reverse=True)


def find_by_id(processos: Iterable[Processo], processo_id: float) -> Processo | None:
    """Return the first record with the given id, or None."""
    return next((p for p in processos if p.id == processo_id), None)


def days_in_progress(processo: Processo, today: datetime | None = None) -> int:
    """Whole days elapsed since the record's filing date."""
    match = _DATE_RE.match(processo.data_ajuizamento)
    if match is None:
        raise ValueError(f"invalid filing date: {processo.data_ajuizamento!r}")
    year, month, day = (int(group) for group in match.groups())
    start = datetime(year, month, day)
    now = today if today is not None else datetime.now()
    return int((now - start).total_seconds() / 86400)


def with_multiple_subjects(processos: Iterable[Processo]) -> list[Processo]:
    """Records whose subject field lists more than one subject."""
    return [p for p in processos if len(_tokens(p.id_assunto)) > 1]


def unique_subjects(processos: Iterable[Processo]) -> list[str]:
    """Distinct subject ids in order of first appearance."""
    seen: dict[str, None] = {}
    for processo in processos:
        for token in _tokens(processo.id_assunto):
            seen.setdefault(token)
    return list(seen)


def count_by_class(processos: Iterable[Processo], classe: str) -> int:
    """Number of records whose class list contains ``classe``."""
    wanted = strip_quotes(classe)
    return sum(1 for p in processos if wanted in _tokens(p.id_classe))