import logging
import os
from pathlib import Path
from typing import List, Optional

import typer

from . import CrawlerError, NotFoundError, PayrollDownloader, PayrollExtractor
from .config import settings

logger = logging.getLogger("tjpb")

app = typer.Typer(help="Download TJPB payroll reports.", add_completion=False)


@app.command()
def main(
    year: int = typer.Option(..., help="Year of the reports."),
    month: Optional[List[int]] = typer.Option(
        None, min=1, max=12, help="Month (1-12); repeat for several. Defaults to the whole year."
    ),
    output_dir: Optional[Path] = typer.Option(None, help="Where to save the PDFs."),
    extract: bool = typer.Option(False, help="Also extract each PDF into a CSV."),
) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    output_dir = output_dir or settings.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    downloader = PayrollDownloader(output_dir=output_dir)
    extractor = PayrollExtractor()
    for m in month or range(1, 13):
        try:
            paths = downloader.download_reports(month=m, year=year)
        except NotFoundError as e:
            logger.warning(str(e))
            continue
        except CrawlerError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1)
        for pdf_path in paths:
            typer.echo(pdf_path)
            if extract:
                extractor.extract_and_save(
                    pdf_path=pdf_path, csv_output=os.path.splitext(pdf_path)[0] + ".csv"
                )
