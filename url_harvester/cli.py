import argparse
import sys

from url_harvester.errors import ExportError
from url_harvester.main import SOURCES_FILE, main as run_harvest
from url_harvester.utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="url-harvester",
        description="Extract URLs from websites, PDFs and files and export them to Excel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  url-harvester https://example.com
  url-harvester report.pdf notes.txt -o links.xlsx
  url-harvester --print                 # reads sources from {SOURCES_FILE}
        """,
    )
    parser.add_argument("sources", nargs="*", help="Website URLs or local file paths")
    parser.add_argument("-o", "--output", default=None, help="Output .xlsx path (default: cache/extracted_urls.xlsx)")
    parser.add_argument("--upload", action="store_true", help="Copy the exported workbook to GCS_BUCKET after the run")
    parser.add_argument("--print", dest="print_urls", action="store_true", help="Also print each URL on its own line")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # stdout is reserved for --print output
    setup_logger(stream=sys.stderr)

    try:
        result = run_harvest(args.sources or None, output_path=args.output, upload=args.upload)
    except FileNotFoundError:
        print(f"❌ No sources given and {SOURCES_FILE} not found", file=sys.stderr)
        return 1
    except ExportError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.print_urls:
        for record in result.records:
            print(record.url)

    for source, error in result.failures.items():
        print(f"⚠️  {source}: {error}", file=sys.stderr)

    print(f"✅ {len(result.records)} URLs written to {result.output_path}", file=sys.stderr)
    if result.uploaded_uri:
        print(f"☁️  Uploaded to {result.uploaded_uri}", file=sys.stderr)

    if result.all_failed:
        return 1
    return 0


if __name__ == "__main__":
    exit(main())
