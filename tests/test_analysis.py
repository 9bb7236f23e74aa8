from datetime import datetime, timedelta

import pytest

from processos.analysis import (
    count_by_class,
    days_in_progress,
    find_by_id,
    sort_by_date,
    sort_by_id,
    unique_subjects,
    with_multiple_subjects,
)
from processos.records import Processo


def make(pid, date="2020-01-01", classe="{1}", assunto="{1}"):
    return Processo(float(pid), f"N{pid}", date, classe, assunto, 2020)


def test_sort_by_date_newest_first_and_stable():
    a = make(1, "2019-05-05")
    b = make(2, "2021-01-01")
    c = make(3, "2019-05-05")
    result = sort_by_date([a, b, c])
    assert result == [b, a, c]


def test_find_by_id():
    records = [make(1), make(2)]
    assert find_by_id(records, 2.0) is records[1]
    assert find_by_id(records, 9.0) is None


def test_days_in_progress_counts_whole_days():
    start = datetime(2020, 1, 1)
    record = make(1, "2020-01-01 00:00:00")
    assert days_in_progress(record, start + timedelta(days=10, hours=5)) == 10


def test_days_in_progress_invalid_date():
    with pytest.raises(ValueError):
        days_in_progress(make(1, '"2020-01-01"'), datetime(2020, 1, 2))


def test_with_multiple_subjects():
    single = make(1, assunto="{11}")
    multiple = make(2, assunto="{11,22}")
    assert with_multiple_subjects([single, multiple]) == [multiple]


def test_unique_subjects_in_first_seen_order():
    records = [make(1, assunto="{11,22}"), make(2, assunto="{22}"), make(3, assunto="{33,11}")]
    assert unique_subjects(records) == ["11", "22", "33"]


def test_count_by_class_matches_whole_tokens_and_strips_quotes():
    records = [make(1, classe="{12,34}"), make(2, classe="{123}"), make(3, classe="{12}")]
    assert count_by_class(records, '"12"') == 2
    assert count_by_class(records, "99") == 0