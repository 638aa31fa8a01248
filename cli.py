import argparse
import logging
import sys
from markdown_header_anchors.pipeline import HeaderProcessingPipeline, TOC_FORMATS


def main(argv=None):
    parser = argparse.ArgumentParser(description="Markdown Header Anchors CLI")
    parser.add_argument("input", type=str, help="Path of the input markdown file")
    parser.add_argument("-o", "--output", type=str, help="Path of the processed output file (stdout if omitted)")
    parser.add_argument("--toc", type=str, help="Path where the table of contents is written")
    parser.add_argument("--toc-format", type=str, choices=TOC_FORMATS, default="json", help="Table of contents format")
    parser.add_argument("-c", "--config", type=str, help="Path of a YAML or JSON configuration file (optional)")
    parser.add_argument("--log", type=str, default=None,
                        help="Log level (DEBUG, INFO, WARNING, ERROR) or a .log file path; overrides the logging section of the configuration")
    args = parser.parse_args(argv)

    # A .log path writes to that file and the console
    if args.log and args.log.lower().endswith('.log'):
        logging.basicConfig(
            level=logging.INFO,
            format="%(levelname)s:%(name)s:%(message)s",
            handlers=[
                logging.FileHandler(args.log, mode='w', encoding='utf-8'),
                logging.StreamHandler()
            ],
            force=True
        )
    elif args.log:
        logging.basicConfig(level=getattr(logging, args.log.upper(), logging.INFO), force=True)

    try:
        pipeline = HeaderProcessingPipeline(config_path=args.config, setup_logging=args.log is None)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    try:
        result = pipeline.process_file(args.input)
    except OSError as e:
        parser.error(f"Cannot read {args.input}: {e}")

    try:
        pipeline.write_outputs(result, output_path=args.output, toc_path=args.toc, toc_format=args.toc_format)
    except OSError as e:
        parser.error(f"Cannot write output: {e}")

    if not args.output:
        sys.stdout.write(result.processed_content)

    return 0


if __name__ == "__main__":
    sys.exit(main())
