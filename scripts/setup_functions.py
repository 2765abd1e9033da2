"""Setup helpers for setup.py in the safe-collections package."""

import fnmatch
import os
from os.path import exists
from shutil import rmtree

from setuptools import Command


def parse_requirements(fname):
    """Turn requirements.txt into a list, skipping comments and blank lines"""
    with open(fname, encoding="utf8") as stream:
        lines = (line.split("#", 1)[0].strip() for line in stream)
        return [line for line in lines if line]


# ======================================================================================
# Extending setup commands; here "clean"
# ======================================================================================


class CleanUp(Command):
    """Custom ``clean`` command.

    Gets rid of "dist" folder and other build and test leftovers, see setup.py.
    """

    description = "remove build, test and bytecode leftovers"
    user_options = [("dry-run", "n", "only list what would be removed")]

    CLEANFOLDERS = (
        "__pycache__",
        ".eggs",
        "dist",
        "build",
        "sdist",
        "wheel",
        ".pytest_cache",
        "docs/apiref",
        "docs/_build",
    )

    CLEANFOLDERSRECURSIVE = ["__pycache__", "_tmp_*", "*.egg-info"]
    CLEANFILESRECURSIVE = ["*.pyc", "*.pyo"]

    def initialize_options(self):
        self.dry_run = False

    def finalize_options(self):
        pass

    @staticmethod
    def ffind(pattern, path):
        """Find files."""
        result = []
        for root, _, files in os.walk(path):
            for name in files:
                if fnmatch.fnmatch(name, pattern):
                    result.append(os.path.join(root, name))
        return result

    @staticmethod
    def dfind(pattern, path):
        """Find folders."""
        result = []
        for root, dirs, _ in os.walk(path):
            for name in dirs:
                if fnmatch.fnmatch(name, pattern):
                    result.append(os.path.join(root, name))
        return result

    def run(self):
        for dir_ in CleanUp.CLEANFOLDERS:
            if exists(dir_):
                print(f"Removing: {dir_}")
            if not self.dry_run and exists(dir_):
                rmtree(dir_)

        for dir_ in CleanUp.CLEANFOLDERSRECURSIVE:
            for pdir in self.dfind(dir_, "."):
                print(f"Remove folder {pdir}")
                if not self.dry_run:
                    rmtree(pdir, ignore_errors=True)

        for fil_ in CleanUp.CLEANFILESRECURSIVE:
            for pfil in self.ffind(fil_, "."):
                print(f"Remove file {pfil}")
                if not self.dry_run:
                    os.unlink(pfil)
