"""Pipeline orchestrator for Markdown Header Anchors."""

import json
import logging
from pathlib import Path
from typing import Optional, List, Union

import yaml

from .config.configuration_manager import ConfigurationManager, Configuration
from .core.models import ProcessResult, TocEntry
from .processing.header_processor import HeaderProcessor, generate_table_of_contents
from .processing.toc import format_toc_markdown, toc_to_dicts
from .rendering.markup import AnchoredHeadingMarkup


logger = logging.getLogger(__name__)

TOC_FORMATS = ["json", "yaml", "markdown"]


class HeaderProcessingPipeline:
    """
    Loads configuration, sets up logging and runs the header processor over
    text or files.
    """

    def __init__(self,
                 config_path: Optional[str] = None,
                 config: Optional[Configuration] = None,
                 setup_logging: bool = True):
        """
        Initialize the pipeline.

        Args:
            config_path: Path to configuration file
            config: Pre-configured Configuration object (overrides config_path)
            setup_logging: Configure root logging from the logging section
        """
        if config is not None:
            self.config_manager = ConfigurationManager()
            self.config_manager.config = config
        else:
            self.config_manager = ConfigurationManager(config_path)

        self.config = self.config_manager.get_config()
        self.config_manager.validate_config()

        if setup_logging:
            self._setup_logging()

        self.processor = HeaderProcessor(
            config=self.config.processor,
            markup=AnchoredHeadingMarkup(self.config.markup)
        )

        logger.debug(self.config_manager.get_summary())

    def _setup_logging(self) -> None:
        """Setup logging configuration, replacing any existing root handlers."""
        handlers = [logging.StreamHandler()]
        if self.config.logging.file:
            handlers.append(logging.FileHandler(self.config.logging.file, encoding='utf-8'))

        logging.basicConfig(
            level=getattr(logging, self.config.logging.level.upper()),
            format=self.config.logging.format,
            handlers=handlers,
            force=True
        )

    def process_text(self, content: str) -> ProcessResult:
        """Process markdown text."""
        return self.processor.process(content)

    def process_file(self, path: Union[str, Path]) -> ProcessResult:
        """
        Process a markdown file.

        Undecodable bytes are replaced rather than rejected, so any file
        content yields a result.
        """
        path = Path(path)
        logger.info(f"Processing headings in {path}")

        content = path.read_text(encoding='utf-8', errors='replace')
        result = self.processor.process(content)

        logger.info(f"Found {len(result.headers)} headings in {path}")
        return result

    def table_of_contents(self, result: ProcessResult) -> List[TocEntry]:
        """Derive the table of contents for a processing result."""
        return generate_table_of_contents(result.headers)

    def format_toc(self, entries: List[TocEntry], toc_format: str = "json") -> str:
        """
        Serialize TOC entries.

        Args:
            entries: Table-of-contents entries
            toc_format: One of json, yaml, markdown

        Returns:
            Serialized table of contents
        """
        if toc_format == "json":
            return json.dumps(toc_to_dicts(entries), indent=2, ensure_ascii=False) + "\n"
        if toc_format == "yaml":
            return yaml.safe_dump(toc_to_dicts(entries), sort_keys=False, allow_unicode=True)
        if toc_format == "markdown":
            return format_toc_markdown(entries)
        raise ValueError(f"Unsupported TOC format: {toc_format}. Must be one of: {TOC_FORMATS}")

    def write_outputs(self,
                      result: ProcessResult,
                      output_path: Optional[Union[str, Path]] = None,
                      toc_path: Optional[Union[str, Path]] = None,
                      toc_format: str = "json") -> None:
        """
        Write processed content and/or table of contents to disk.

        Args:
            result: Result of process_text or process_file
            output_path: Destination for the processed content
            toc_path: Destination for the table of contents
            toc_format: Serialization for the table of contents
        """
        if output_path is not None:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.processed_content, encoding='utf-8')
            logger.info(f"Processed content saved to {output_path}")

        if toc_path is not None:
            toc_text = self.format_toc(self.table_of_contents(result), toc_format)
            toc_path = Path(toc_path)
            toc_path.parent.mkdir(parents=True, exist_ok=True)
            toc_path.write_text(toc_text, encoding='utf-8')
            logger.info(f"Table of contents saved to {toc_path}")
