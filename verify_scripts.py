import sys
import logging
import argparse
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent))

from scenario import ScriptParser, ScriptError, SourceUnavailableError, load_schema


def main():
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("ScriptVerification")

    arg_parser = argparse.ArgumentParser(description="Parse dialogue scripts and report their structure.")
    arg_parser.add_argument("scripts", nargs="+", type=Path, help="Tab separated script files")
    arg_parser.add_argument("--schema", type=Path, help="JSON column schema")
    arg_parser.add_argument("--json", action="store_true", help="Also write a .json next to each script")
    args = arg_parser.parse_args()

    parser = ScriptParser(schema=load_schema(args.schema)) if args.schema else ScriptParser()
    failed = 0

    for script in args.scripts:
        try:
            result = parser.parse_file(script)
        except (ScriptError, SourceUnavailableError) as e:
            logger.error(f"VERIFICATION FAILED for {script}: {e}")
            failed += 1
            continue

        for topic in result.topics:
            answers = sum(len(block.answers) for block in topic.blocks)
            logger.info(f"  {topic.name}: {len(topic.blocks)} questions, {answers} answers")

        if args.json:
            parser.save_json(result, script.with_suffix('.json'))

        logger.info(f"{script}: OK ({len(result.topics)} topics)")

    if failed:
        sys.exit(1)
    logger.info("VERIFICATION SUCCESSFUL: All scripts parsed.")


if __name__ == "__main__":
    main()
