"""Example of how to use the Reports service."""

import argparse
import logging
from datetime import date

from rich import pretty
from rich.console import Console
from rich.traceback import install

from visitreport.services.reports import Category, InMemoryVisitStore, ReportsService

install(show_locals=True)
pretty.install()

console = Console()


def main():
    """Main function."""
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Reports service example.")
    parser.add_argument("--college", default="Example State University")
    parser.add_argument(
        "--output-dir",
        default="exports",
        help="Directory to write the Markdown and HTML reports to.",
    )
    args = parser.parse_args()

    store = InMemoryVisitStore()
    visit = store.create_visit(
        "local", args.college, date.today(), location="Springfield, IL"
    )
    store.add_note(visit.id, "Strong computer science department.", Category.ACADEMICS)
    store.add_note(visit.id, "Dorms were renovated last summer.", Category.HOUSING)
    store.add_note(visit.id, "Small seminar classes, even in first year.", "academics")
    store.add_photo(visit.id, "https://storage.example.com/quad.jpg", "Main quad")
    store.add_photo(visit.id, "https://storage.example.com/library.jpg")

    service = ReportsService(store)
    report = service.generate(visit.id)

    console.rule("Report text")
    console.print(report.report_content, markup=False, highlight=False)

    console.rule("Rendered blocks")
    for block in service.render(report):
        console.print(block)

    console.rule("Exports")
    console.print(service.export(visit.id, args.output_dir))
    console.print(service.export(visit.id, args.output_dir, fmt="html"))


if __name__ == "__main__":
    main()
