# Standard Library
import os
import sys


def repo_root():
	return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


#============================================
def tests_path(*parts):
	return os.path.join(repo_root(), "tests", *parts)


def add_svgbuilder_to_sys_path():
	package_dir = os.path.join(repo_root(), "packages", "svgbuilder")
	if package_dir not in sys.path:
		sys.path.insert(0, package_dir)
	return package_dir


add_svgbuilder_to_sys_path()
