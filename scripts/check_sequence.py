"""Check the structure of a motion sequence specified in a YAML file.

To run this script, use the commands:

    uv venv --clear && uv sync
    uv run scripts/check_sequence.py path/to/sequence.yaml

"""

from motion_sequencing.io.sequence_cli import check_sequence

if __name__ == "__main__":
    check_sequence()
