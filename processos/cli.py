"""Interactive menu over a CSV file of court cases."""

from __future__ import annotations

import argparse
import re
import sys
from os import PathLike
from pathlib import Path
from typing import Callable, Iterable, TextIO

from .analysis import (
    count_by_class,
    days_in_progress,
    find_by_id,
    sort_by_date,
    sort_by_id,
    unique_subjects,
    with_multiple_subjects,
)
from .records import Processo, read_processos, strip_quotes, write_csv

DEFAULT_FILE = "processo_043_202409032338.csv"
ID_SORTED_FILE = "id_ORDERNADO.csv"
DATE_SORTED_FILE = "data_ajuizamento_ORDERNADO.csv"

_MENU = (
    "\nMenu:\n"
    "1. Ordenar por ID\n"
    "2. Ordenar por data de ajuizamento\n"
    "3. Contar processos por id_classe\n"
    "4. Contar id_assuntos únicos\n"
    "5. Verificar processos com mais de um assunto\n"
    "6. Dias de tramitação por ID\n"
    "7. Sair\n"
    "Opção: "
)

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _save(processos: list[Processo], path: Path, message: str, out: TextIO) -> None:
    try:
        write_csv(processos, path)
    except OSError:
        print("Erro ao salvar arquivo.", file=out)
        return
    print(message, file=out)


def _report_days(processos: list[Processo], raw: str, out: TextIO) -> None:
    match = _FLOAT_RE.match(raw)
    if match is None:
        print("ID inválido.", file=out)
        return
    processo_id = float(match.group(1))
    processo = find_by_id(processos, processo_id)
    if processo is None:
        print(f"ID {processo_id:.0f} não encontrado.", file=out)
        return
    try:
        days = days_in_progress(processo)
    except ValueError:
        print(f"Data de ajuizamento inválida para o ID {processo_id:.0f}.", file=out)
        return
    print(f"Processo ID {processo_id:.0f} está em tramitação há {days} dias.", file=out)


def menu(
    processos: Iterable[Processo],
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
    workdir: str | PathLike[str] | None = None,
) -> None:
    """Run the menu loop until option 7 is chosen or input runs out."""
    read = input_func or input
    out = output or sys.stdout
    directory = Path(workdir) if workdir is not None else Path(".")
    current = list(processos)

    while True:
        out.write(_MENU)
        out.flush()
        try:
            match = _INT_RE.match(read())
            option = int(match.group(1)) if match else None

            if option == 1:
                current = sort_by_id(current)
                _save(
                    current,
                    directory / ID_SORTED_FILE,
                    f"Arquivo {ID_SORTED_FILE} criado. Processos ordenados por ID.",
                    out,
                )
            elif option == 2:
                current = sort_by_date(current)
                _save(
                    current,
                    directory / DATE_SORTED_FILE,
                    f"Arquivo {DATE_SORTED_FILE} criado. Processos ordenados por data.",
                    out,
                )
            elif option == 3:
                out.write("Digite o id_classe: ")
                out.flush()
                classe = strip_quotes(read().lstrip()[:99])
                total = count_by_class(current, classe)
                print(f'Total de processos com id_classe "{classe}": {total}', file=out)
            elif option == 4:
                print(f"Total de id_assuntos únicos: {len(unique_subjects(current))}", file=out)
            elif option == 5:
                for processo in with_multiple_subjects(current):
                    print(
                        f"Processo {processo.id:.0f} tem MAIS de um assunto: {processo.id_assunto}",
                        file=out,
                    )
            elif option == 6:
                out.write("Digite o ID do processo: ")
                out.flush()
                _report_days(current, read(), out)
            elif option == 7:
                return
            else:
                print("Opção inválida.", file=out)
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Load the CSV file and start the menu."""
    parser = argparse.ArgumentParser(
        prog="processos", description="Consulta processos de um arquivo CSV."
    )
    parser.add_argument("arquivo", nargs="?", default=DEFAULT_FILE)
    args = parser.parse_args(argv)
    try:
        processos = read_processos(args.arquivo)
    except OSError:
        print("Erro ao abrir o arquivo.")
        return 1
    menu(processos)
    return 0


if __name__ == "__main__":
    sys.exit(main())