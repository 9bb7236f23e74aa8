# processos

`processos` reads a CSV export of court case records (*processos*) and lets you explore it
from an interactive menu or from Python code.

The file must start with a header line. The package skips that line. Each data line has six
columns:

```
id,numero,data_ajuizamento,id_classe,id_assunto,ano_eleicao
```

Commas inside double quotes do not split a field. The sixth field takes the rest of the line.
The reader skips lines with fewer than six fields. It keeps at most 19000 records.
`id_classe` and `id_assunto` may hold several values in braces, for example `"{123,456}"`.
The reader removes the quotes from these two fields.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install .[test]
pytest
```

## Command line

```
processos [ARQUIVO]
```

If you do not give a file, the command reads `processo_043_202409032338.csv` from the current
directory. If the file cannot be opened, the command prints `Erro ao abrir o arquivo.` and
exits with status 1. Otherwise it shows this menu. The prompts are in Portuguese.

1. Sort by ID in ascending order. The result goes to `id_ORDERNADO.csv` in the current directory.
2. Sort by filing date, newest first. The result goes to `data_ajuizamento_ORDERNADO.csv`.
3. Ask for an `id_classe` and count the records whose class list contains it.
4. Count the distinct `id_assunto` values across all records.
5. List the records that have more than one subject.
6. Ask for an ID and show how many whole days have passed since that case's filing date.
7. Quit.

A sort changes the order that later options see. The menu also ends when input runs out.

## Library use

```python
from processos.records import read_processos, write_csv
from processos.analysis import (
    sort_by_id, sort_by_date, find_by_id, days_in_progress,
    with_multiple_subjects, unique_subjects, count_by_class,
)

processos = read_processos("cases.csv")
write_csv(sort_by_id(processos), "by_id.csv")
print(len(unique_subjects(processos)))
print(count_by_class(processos, "11541"))

case = find_by_id(processos, 42)
if case is not None:
    print(days_in_progress(case))
```

`processos.records`:

- `Processo` is a dataclass with the fields `id` (float), `numero`, `data_ajuizamento`,
  `id_classe`, `id_assunto` and `ano_eleicao` (int).
- `parse_line(line)` returns one `Processo`, or `None` if the line has fewer than six fields.
- `read_processos(path)` reads a whole file.
- `write_csv(processos, path)` writes records with the same header. The id is written as an
  integer and `numero` is written in quotes.
- `strip_quotes(text)` and `strip_braces(text)` remove double quotes and curly braces.

`processos.analysis`:

- `sort_by_id` and `sort_by_date` return new lists. Records that compare equal keep their
  original order.
- `find_by_id(processos, processo_id)` returns the first match, or `None`.
- `days_in_progress(processo, today=None)` counts whole days from the `YYYY-MM-DD` filing date
  to `today`, or to now if you do not give `today`. It raises `ValueError` if the date cannot
  be read.
- `with_multiple_subjects(processos)` returns the records that have more than one subject.
- `unique_subjects(processos)` returns each subject once, in the order it first appears.
- `count_by_class(processos, classe)` returns how many records list the given class.

`processos.cli.menu(processos, input_func=None, output=None, workdir=None)` runs the same
menu. You can pass your own input function, output stream and directory for the sorted files.

## Playlist

`processos.playlist` has a small doubly linked list of songs:

```python
from processos.playlist import Playlist, Song, sample_playlist

playlist = sample_playlist()
for song in playlist:
    print(song.title, song.author, song.year)
print(len(playlist), [s.title for s in reversed(playlist)])

playlist.append(Song("Nova", "Alguém", 2000))
```

Each `Song` has a `previous` and a `next` link. `Playlist.append` raises `ValueError` if the
song is already linked into a list. The playlist can only be appended to. It has no removal,
insertion or saving to disk.