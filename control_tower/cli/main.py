"""
Punto de entrada CLI: control-tower-parser.

Uso:
    # Parsear la exportación del tablero a Excel
    control-tower-parser /ruta/operaciones.csv -o /ruta/salida

    # JSON para el backend, marcando como completadas las liberaciones
    # con fecha hasta el 30 de septiembre
    control-tower-parser operaciones.csv --formato json --fecha-referencia 2025-09-30

    # Carpeta con varias exportaciones
    control-tower-parser /ruta/exportaciones

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (PandasCsvSource, ConsoleLogger, writers).
- Las inyecta en el OperationBatchProcessor.
- Ejecuta el procesamiento.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from control_tower.adapters.input.csv_sources.pandas_csv_source import (
    COLUMNA_INFO_DEFAULT,
    COLUMNA_NOMBRE_DEFAULT,
    PandasCsvSource,
)
from control_tower.adapters.output.loggers.console_logger import ConsoleLogger
from control_tower.domain.exceptions import OutputError
from control_tower.domain.services.operation_batch_processor import OperationBatchProcessor
from control_tower.infrastructure.registry import create_default_registry


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    writer_registry = create_default_registry()
    args = _parse_args(argv, writer_registry.available_formats)

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=args.verbose)
    sources = [
        PandasCsvSource(
            columna_info=args.columna,
            columna_nombre=args.columna_nombre,
            separador=args.separador,
        ),
    ]
    writer = writer_registry.get(args.formato)

    processor = OperationBatchProcessor(
        sources=sources,
        logger=logger,
        fecha_referencia=args.fecha_referencia,
    )

    # --- Determinar archivos y directorio de salida ---
    if input_path.is_file():
        archivos = [input_path]
    elif input_path.is_dir():
        archivos = sorted(input_path.glob("*.csv"))
    else:
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("CONTROL TOWER PARSER")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir}")
    print(f"  Formato:  {writer.format_name}")
    print(f"  Columna:  {args.columna}")
    if args.fecha_referencia:
        print(f"  Fecha de referencia: {args.fecha_referencia.isoformat()}")
    print()

    # --- Procesar ---
    resultados = processor.process_files(archivos)
    if not resultados:
        print("\n❌ No se procesó ningún archivo.")
        logger.print_summary()
        sys.exit(1)

    for resultado in resultados:
        nombre_base = Path(resultado.archivo_origen).stem
        output_file = output_dir / f"operaciones_{nombre_base}{writer.extension}"
        try:
            ruta = writer.write(resultado, output_file)
        except OutputError as e:
            logger.log_error(output_file, e)
            continue
        logger.log_export_complete(ruta, resultado.num_operaciones)

    # --- Resumen final ---
    logger.print_summary()


def _fecha_iso(valor: str) -> date:
    try:
        return date.fromisoformat(valor)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Fecha inválida (se espera YYYY-MM-DD): {valor}")


def _parse_args(argv: list[str] | None, formatos: list[str]) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Extractor de información de operaciones de comercio exterior",
        epilog="Ejemplo: control-tower-parser operaciones.csv -o salida --formato json",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a un CSV exportado del tablero o a un directorio con CSVs",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida. Si no se especifica, se usa el mismo "
        "directorio del CSV.",
    )

    parser.add_argument(
        "--columna",
        default=COLUMNA_INFO_DEFAULT,
        help=f"Columna con el texto de la operación (default: '{COLUMNA_INFO_DEFAULT}')",
    )

    parser.add_argument(
        "--columna-nombre",
        dest="columna_nombre",
        default=COLUMNA_NOMBRE_DEFAULT,
        help=f"Columna con el nombre de la operación (default: '{COLUMNA_NOMBRE_DEFAULT}')",
    )

    parser.add_argument(
        "--formato",
        choices=formatos,
        default="xlsx",
        help="Formato de salida (default: xlsx)",
    )

    parser.add_argument(
        "--fecha-referencia",
        dest="fecha_referencia",
        type=_fecha_iso,
        default=None,
        help="Fecha YYYY-MM-DD: las liberaciones con fecha hasta este día "
        "se marcan 'completado'. Sin ella, todas quedan 'pendiente'.",
    )

    parser.add_argument(
        "--separador",
        default=",",
        help="Separador de campos del CSV (default: ',')",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Imprime cada fila parseada o descartada",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
