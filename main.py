"""Main orchestration script for generating DocFX metadata and Hugo documentation."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate DocFX metadata and Hugo API documentation."
    )
    parser.add_argument(
        "--skip-metadata",
        action="store_true",
        help="Convert the existing api/ folder without running docfx first",
    )
    parser.add_argument(
        "--overwrite-dir",
        help="Directory of DocFX overwrite files to merge into the metadata",
    )
    parser.add_argument(
        "--out-dir",
        default="content/api",
        help="Where to write the Markdown pages (default: content/api)",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if not args.skip_metadata:
        # 1. Generate YAML metadata using dotnet docfx
        print("--- Step 1: Generating DocFX metadata ---")
        # This command looks for docfx.json in the current directory by default
        run_command(["dotnet", "docfx", "metadata"])

    # 2. Convert YAML to Hugo Markdown
    print("\n--- Step 2: Converting YAML to Hugo Markdown ---")
    yml_dir = root_dir / "api"
    out_dir = root_dir / args.out_dir

    cmd = [
        sys.executable,
        "-m",
        "docfx_to_hugo.docfx_yml_to_hugo",
        str(yml_dir),
        str(out_dir),
    ]
    if args.overwrite_dir:
        cmd.extend(["--overwrite-dir", args.overwrite_dir])
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: Documentation generated in {out_dir}")


if __name__ == "__main__":
    main()
