"""Utility script to render a stored template into a PDF file."""

from __future__ import annotations

import argparse
from datetime import date

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.templates import render_template
from app.domain.rendering import RenderOptions, RenderSubject
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.rendering import ReportLabCanvas


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for rendering."""

    parser = argparse.ArgumentParser(
        description="Render a certificate template into a PDF file.",
    )
    parser.add_argument("template_id", type=int, help="Identificador de la plantilla")
    parser.add_argument(
        "--output",
        default="certificate.pdf",
        help="Ruta del PDF generado (por defecto: certificate.pdf)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Nombre completo del destinatario. Sin él se genera una vista previa.",
    )
    parser.add_argument("--course", default=None, help="Nombre del curso (opcional)")
    parser.add_argument(
        "--issued-on",
        type=date.fromisoformat,
        default=None,
        help="Fecha de emisión en formato AAAA-MM-DD (por defecto: hoy)",
    )
    return parser.parse_args()


def main() -> None:
    """Render the template selected on the command line."""

    args = parse_args()

    subject = None
    if args.name:
        subject = RenderSubject(
            full_name=args.name, course_name=args.course, issued_on=args.issued_on
        )
    options = RenderOptions(preview=subject is None, subject=subject, return_bytes=False)

    initialize_database()

    session = SessionLocal()
    try:
        render_template(
            session,
            template_id=args.template_id,
            options=options,
            canvas=ReportLabCanvas(args.output),
        )
    except ValueError as exc:
        raise SystemExit(f"No se pudo generar el documento: {exc}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Error al leer la plantilla de la base de datos: {exc}") from exc
    else:
        print(f"Documento generado en {args.output}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
