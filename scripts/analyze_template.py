"""Template analysis script.

Reads already-extracted template text and prints the parsed fields,
validation warnings and synthesized table schema as JSON.

Usage:
    python -m scripts.analyze_template path/to/template.txt --name "Customer Form"
    or
    python scripts/analyze_template.py path/to/template.txt (after pip install -e .)
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from formsynth.core.errors import FormSynthError
from formsynth.core.factory import get_factory
from formsynth.core.logging_config import setup_logging
from formsynth.services import TemplateService


def main(argv: list[str] | None = None) -> int:
    """Analyze one template text file."""
    arg_parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    arg_parser.add_argument("file", type=Path, help="Extracted template text (.txt or .md)")
    arg_parser.add_argument("--name", help="Template name (defaults to the file stem)")
    arg_parser.add_argument("--description", help="Template description")
    args = arg_parser.parse_args(argv)

    factory = get_factory()
    setup_logging(factory.settings)

    service = TemplateService(factory)
    try:
        analysis = service.analyze_file(args.file, name=args.name, description=args.description)
    except (FileNotFoundError, FormSynthError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(analysis.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
