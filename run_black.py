#!/usr/bin/env python3
"""
Script to run black and mypy on the report engine codebase.
"""
import subprocess
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
PACKAGE_DIR = os.path.join(PROJECT_ROOT, "report_engine")


def run_tool(name, args):
    print(f"Running {name} on the report engine codebase...")
    try:
        subprocess.run([name, *args, PACKAGE_DIR], check=True)
        print(f"{name} completed successfully!")
        return 0
    except subprocess.CalledProcessError as e:
        print(f"Error running {name}: {e}")
        return 1


if __name__ == "__main__":
    black_result = run_tool("black", [])
    mypy_result = run_tool("mypy", ["--ignore-missing-imports"])
    sys.exit(black_result or mypy_result)  # Exit with error if either tool failed
