"""Court case records and their CSV representation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator

MAX_LINES = 19000
FIELD_COUNT = 6
CSV_HEADER = "id,numero,data_ajuizamento,id_classe,id_assunto,ano_eleicao"

_NUMERO_LEN = 24
_DATA_LEN = 23
_CLASSE_LEN = 99
_ASSUNTO_LEN = 99

_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_LINE_END_RE = re.compile(r"[\r\n]")


@dataclass
class Processo:
    """One court case as read from the CSV file."""

    id: float
    numero: str
    data_ajuizamento: str
    id_classe: str
    id_assunto: str
    ano_eleicao: int


def strip_quotes(text: str) -> str:
    """Return ``text`` without any double quote characters."""
    return text.replace('"', "")


def strip_braces(text: str) -> str:
    """Return ``text`` without any curly braces."""
    return text.replace("{", "").replace("}", "")


def _leading_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _leading_int(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _split_fields(line: str) -> list[str]:
    """Split on commas outside quotes; the last field keeps the rest of the line."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for position, char in enumerate(line):
        if len(fields) == FIELD_COUNT - 1:
            current.append(line[position:])
            break
        if char == '"':
            in_quotes = not in_quotes
            current.append(char)
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields


def parse_line(line: str) -> Processo | None:
    """Parse one data line, or return None when it has fewer than six fields."""
    line = _LINE_END_RE.split(line, maxsplit=1)[0]
    fields = _split_fields(line)
    if len(fields) < FIELD_COUNT:
        return None
    return Processo(
        id=_leading_float(fields[0]),
        numero=fields[1][:_NUMERO_LEN],
        data_ajuizamento=fields[2][:_DATA_LEN],
        id_classe=strip_quotes(fields[3][:_CLASSE_LEN]),
        id_assunto=strip_quotes(fields[4][:_ASSUNTO_LEN]),
        ano_eleicao=_leading_int(fields[5]),
    )


def _iter_records(lines: Iterable[str]) -> Iterator[Processo]:
    for line in lines:
        record = parse_line(line)
        if record is not None:
            yield record


def read_processos(path: str | PathLike[str]) -> list[Processo]:
    """Read at most MAX_LINES records from a CSV file, skipping its header."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        next(handle, None)
        records: list[Processo] = []
        for record in _iter_records(handle):
            if len(records) >= MAX_LINES:
                break
            records.append(record)
    return records


def format_processo(processo: Processo) -> str:
    """Format one record as a CSV line without its line ending."""
    return (
        f'{processo.id:.0f},"{processo.numero}",{processo.data_ajuizamento},'
        f"{processo.id_classe},{processo.id_assunto},{processo.ano_eleicao}"
    )


def write_csv(processos: Iterable[Processo], path: str | PathLike[str]) -> None:
    """Write records to ``path`` with the standard header."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(CSV_HEADER + "\n")
        for processo in processos:
            handle.write(format_processo(processo) + "\n")