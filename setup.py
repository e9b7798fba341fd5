# python setup.py build_ext -i clean
import os
import sys

from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "initializedcheck": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
}

# Pure Python mode modules: compiled when Cython is available at build time,
# imported as plain Python otherwise.
py_files = [
    ("dheap.dway_heap.dway_heap", "dheap/dway_heap/dway_heap.py"),
]


def create_extensions(py_files: list[tuple]) -> list[Extension]:
    """
    Create Cython extension for all available module files.

    Parameters
    ----------
    py_files : list[tuple]
        A list of tuples. The first element of the tuple is the module in
        `package.module` format. The second element is the `path` to the file.

    Returns
    -------
    list[Extension]
        A list of Cython extensions
    """
    extensions = []
    for module_name, path in py_files:
        extra_compile_args = []
        if sys.platform != "win32":
            extra_compile_args.extend(["-O3"])

        extension = Extension(
            name=module_name,
            sources=[path],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        extensions.append(extension)
    return extensions


def main() -> None:
    """Main setup function for compiling"""
    # Filter out non-existing files
    files = [
        (name, path)
        for name, path in py_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No module files found to compile")

    extensions = create_extensions(files)

    setup(
        ext_modules=cythonize(
            extensions,
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        packages=find_packages(include=["dheap", "dheap.*"]),
        zip_safe=False
    )


if __name__ == "__main__":
    main()
