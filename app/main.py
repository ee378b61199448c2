"""Command line entry point: validate the portfolio translation files.

Prints a report per namespace and exits with status 1 when any namespace has
errors, so it can gate a build. Warnings are printed but never fail the run.

    python main.py --namespace hero --namespace nav
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Export .env before the settings singleton is built at import
load_dotenv()

from infrastructure.configuration import settings  # noqa: E402
from infrastructure.i18n import (  # noqa: E402
    I18nConfig,
    LengthHeuristic,
    TranslationValidator,
    create_validation_report,
    load_translation_store,
)
from infrastructure.i18n.factory import default_translations_dir  # noqa: E402
from infrastructure.logging import (  # noqa: E402
    add_app_info,
    add_environment_info,
    configure_logging,
    get_module_logger,
    truncate_large_values,
)

logger = get_module_logger()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate translation YAML files")
    parser.add_argument(
        "--dir",
        dest="translations_dir",
        default=settings.i18n.translations_dir,
        help="Directory holding <namespace>.<lang>.yml files (default: app/locales)",
    )
    parser.add_argument(
        "--namespace",
        action="append",
        default=[],
        help="Only validate this top-level namespace (repeatable)",
    )
    parser.add_argument(
        "--ratio",
        type=float,
        default=settings.i18n.length_ratio_threshold,
        help="Length ratio that triggers an inconsistent_length warning",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=settings.i18n.length_min_length,
        help="Shortest value must exceed this before the ratio applies",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Validate every namespace (or the requested ones) and print reports.

    Returns:
        Process exit status: 0 when every namespace is valid, 1 otherwise.
    """
    args = parse_args(argv)
    configure_logging(
        extra_processors=[
            add_app_info("portfolio-i18n", settings.GIT_SHA),
            add_environment_info("production" if settings.is_production else "development"),
            truncate_large_values(),
        ]
    )

    translations_dir = (
        Path(args.translations_dir) if args.translations_dir else default_translations_dir()
    )
    config = I18nConfig.from_settings(settings)
    store = load_translation_store(translations_dir, fallback_language=config.fallback_language)

    validator = TranslationValidator(
        config=config,
        length_heuristic=LengthHeuristic(ratio=args.ratio, min_length=args.min_length),
    )

    fallback_entry = store.get_entry(config.fallback_language)
    if not args.namespace and fallback_entry is None:
        # Nothing to enumerate namespaces from; report the missing language
        result = validator.validate(store)
        print(create_validation_report(result, "translations"))
        return 1

    namespaces = args.namespace or sorted(fallback_entry.children)
    logger.info("validating_translations", translations_dir=str(translations_dir), namespaces=namespaces)

    failed = False
    for namespace in namespaces:
        result = validator.validate_namespace(store, namespace)
        print(create_validation_report(result, namespace))
        print()
        failed = failed or not result.is_valid

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
