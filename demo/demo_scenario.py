#!/usr/bin/env python3
"""
Demo scenario for the TAA command-line assistant.
"""

import sys
import os
import tempfile

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from taa.config import TaaConfig
from taa.main import TaaApplication


SETUP_COMMANDS = [
    "add_module c/CS2113 n/Software Engineering",
    "add_module c/CS2113 n/Other",
    "add_class c/C1 m/CS2113",
    "add_student c/C1 i/A001 n/Alice Tan",
    "add_student c/C1 i/A002 n/Bob Lim",
]

ASSESSMENT_COMMANDS = [
    "add_assessment c/C1 n/Midterm m/50 w/30",
    "add_assessment c/C1 n/Final m/100 w/40",
    "edit_assessment c/C1 n/Midterm w/65",
    "edit_assessment c/C1 n/Midterm w/60",
    "edit_assessment c/C1 n/Midterm nn/Midterm",
    "list_assessments c/C1",
]

MARK_COMMANDS = [
    "set_mark c/C1 i/A001 a/Midterm m/42",
    "set_mark c/C1 i/A002 a/Midterm m/38.5",
    "edit_assessment c/C1 n/Midterm m/40",
    "edit_assessment c/C1 n/Midterm nn/Mid-semester Test",
    "list_marks c/C1 a/Mid-semester Test",
    "average_marks c/C1 a/Mid-semester Test",
]


def run_demo():
    """Run the demo against a throwaway data file."""
    print("=" * 60)
    print("TAA - TEACHING ASSISTANT ASSISTANT - DEMO")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as data_dir:
        config = TaaConfig(data_file=os.path.join(data_dir, "demo_taa.json"))
        application = TaaApplication(config)

        print("\n1. Creating modules, classes and students...")
        run_commands(application, SETUP_COMMANDS)

        print("\n2. Demonstrating assessment weightage rules...")
        run_commands(application, ASSESSMENT_COMMANDS)

        print("\n3. Demonstrating marks...")
        run_commands(application, MARK_COMMANDS)

        print("\n4. Reloading from storage...")
        reloaded = TaaApplication(config)
        reloaded.run_command("list_classes")

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


def run_commands(application, commands):
    for line in commands:
        print(f"> {line}")
        application.run_command(line)


if __name__ == "__main__":
    run_demo()
