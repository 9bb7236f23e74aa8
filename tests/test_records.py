import pytest

from processos.records import (
    CSV_HEADER,
    MAX_LINES,
    Processo,
    parse_line,
    read_processos,
    strip_braces,
    strip_quotes,
    write_csv,
)

PARTS = ["42", '"0600001"', "2016-04-20", '"{12554}"', '"{11778,11779}"', "2016"]
LINE = ",".join(PARTS)


def test_strip_quotes_removes_every_quote():
    text = "ab"
    result = strip_quotes(f'"{text}"{text}"')
    assert result == text + text
    assert '"' not in result


def test_strip_braces_removes_braces_only():
    inner = "1,2"
    assert strip_braces("{" + inner + "}") == inner
    assert strip_braces(inner) == inner


def test_parse_line_keeps_quoted_commas_together():
    record = parse_line(LINE)
    assert record.id == 42.0
    assert record.numero == PARTS[1]
    assert record.data_ajuizamento == PARTS[2]
    assert record.id_classe == "{12554}"
    assert record.id_assunto == "{11778,11779}"
    assert record.ano_eleicao == 2016


def test_parse_line_ignores_line_endings():
    assert parse_line(LINE + "\r\n") == parse_line(LINE)


def test_parse_line_last_field_takes_the_rest():
    record = parse_line(LINE + ",extra")
    assert record.ano_eleicao == 2016


def test_parse_line_short_line_is_none():
    assert parse_line("1,2,3") is None


def test_parse_line_truncates_numero():
    parts = list(PARTS)
    parts[1] = "9" * 30
    record = parse_line(",".join(parts))
    assert len(record.numero) == 24
    assert record.numero == "9" * 24


def test_parse_line_non_numeric_fields_default_to_zero():
    parts = list(PARTS)
    parts[0] = "abc"
    parts[5] = "x"
    record = parse_line(",".join(parts))
    assert record.id == 0.0
    assert record.ano_eleicao == 0


def test_read_processos_skips_header_and_short_lines(tmp_path):
    path = tmp_path / "dados.csv"
    path.write_text(CSV_HEADER + "\n" + LINE + "\n" + "1,2\n" + LINE + "\n", encoding="utf-8")
    records = read_processos(path)
    assert len(records) == 2
    assert records[0] == parse_line(LINE)


def test_read_processos_stops_at_limit(tmp_path):
    path = tmp_path / "dados.csv"
    path.write_text(CSV_HEADER + "\n" + (LINE + "\n") * (MAX_LINES + 1), encoding="utf-8")
    assert len(read_processos(path)) == MAX_LINES


def test_read_processos_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_processos(tmp_path / "missing.csv")


def test_write_csv_header_and_round_trip(tmp_path):
    original = Processo(7.0, "N1", "2020-01-02", "{5}", "{6}", 2020)
    path = tmp_path / "out.csv"
    write_csv([original], path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines[1].startswith('7,"N1",')
    (back,) = read_processos(path)
    assert back.id == original.id
    assert back.numero == f'"{original.numero}"'
    assert back.data_ajuizamento == original.data_ajuizamento
    assert back.id_classe == original.id_classe
    assert back.id_assunto == original.id_assunto
    assert back.ano_eleicao == original.ano_eleicao