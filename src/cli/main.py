"""
Punto de entrada CLI: joltage-calc.

Uso:
    # Selección de 2 baterías por banco (por defecto) sobre input.txt
    joltage-calc

    # Selección de 12 baterías sobre un archivo dado
    joltage-calc /ruta/input.txt -n 12

    # Estrategia O(L·k), 4 hilos y reporte en Excel
    joltage-calc /ruta/input.txt -n 12 -s scan -w 4 -o /ruta/reporte.xlsx

Códigos de salida:
    0 → todos los bancos se procesaron
    1 → error de entrada/salida (archivo inexistente, carácter inválido, ...)
    2 → la corrida terminó pero al menos un banco falló

Este módulo es el ÚNICO lugar donde se ensamblan los componentes.
No contiene lógica de negocio — solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from src.adapters.input.bank_sources.text_file_source import TextFileBankSource
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.exceptions import InputReadError, JoltageBaseError, OutputError
from src.domain.services.bank_aggregator import BankAggregator
from src.infrastructure.registry import DEFAULT_STRATEGY, create_default_registry

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_BANK_FAILURES = 2


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    # Con k > 4300 el joltage tiene más dígitos de los que int -> str
    # permite por defecto; el total debe poder imprimirse siempre
    sys.set_int_max_str_digits(0)

    registry = create_default_registry()
    args = _parse_args(argv, registry.available_strategies)

    input_path = Path(args.input_path)
    output_path = Path(args.output) if args.output else None

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=not args.quiet)
    source = TextFileBankSource(logger=logger)
    selector = registry.get(args.strategy)
    aggregator = BankAggregator(logger=logger, selector=selector, max_workers=args.workers)

    print("=" * 60)
    print("BATTERY JOLTAGE CALCULATOR")
    print("=" * 60)
    print(f"  Entrada:     {input_path}")
    print(f"  Modo:        {args.batteries}-battery selection")
    print(f"  Estrategia:  {args.strategy}")
    print()

    # --- Procesar ---
    try:
        if not source.can_handle(input_path):
            raise InputReadError(
                input_path, f"{source.name} no puede leer esta ruta (¿es un directorio?)"
            )
        banks = source.read_banks(input_path)
        result = aggregator.run(banks, args.batteries)
        if output_path is not None:
            reporte = ExcelWriter().write(result, output_path)
            print(f"\n📁 Excel generado: {reporte}")
    except JoltageBaseError as e:
        # Un OutputError es culpa del reporte, no del archivo de entrada
        ruta_culpable = output_path if isinstance(e, OutputError) else input_path
        logger.log_error(ruta_culpable, e)
        print("\n❌ No se pudo completar la corrida.")
        sys.exit(EXIT_INPUT_ERROR)

    # --- Resumen final ---
    logger.print_summary()

    if result.has_failures:
        sys.exit(EXIT_BANK_FAILURES)


def _positive_int(value: str) -> int:
    """Tipo argparse: entero mayor que 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"número inválido: '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError("debe ser mayor que 0")
    return number


def _parse_args(argv: list[str] | None, strategies: list[str]) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Calcula el joltage máximo de cada banco de baterías y su total",
        epilog="Ejemplo: joltage-calc input.txt -n 12",
    )

    parser.add_argument(
        "input_path",
        nargs="?",
        default="input.txt",
        help="Archivo con un banco de baterías (dígitos) por línea. "
        "Por defecto: input.txt",
    )

    parser.add_argument(
        "-n",
        "--batteries",
        type=_positive_int,
        default=2,
        help="Cantidad de baterías a encender por banco (k). Por defecto: 2",
    )

    parser.add_argument(
        "-s",
        "--strategy",
        choices=strategies,
        default=DEFAULT_STRATEGY,
        help=f"Estrategia de selección. Por defecto: {DEFAULT_STRATEGY}",
    )

    parser.add_argument(
        "-w",
        "--workers",
        type=_positive_int,
        default=1,
        help="Hilos para procesar bancos en paralelo. Por defecto: 1",
    )

    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        help="Ruta del reporte Excel (.xlsx). Si no se especifica, no se genera.",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="No imprimir el resultado de cada banco, solo errores y resumen.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
