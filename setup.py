# python setup.py build_ext -i clean
import os
import sys

from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

# the compiled modules are untyped .py sources, so only the directives that
# change their semantics are set
COMPILER_DIRECTIVES = {
    "language_level": 3,
    "annotation_typing": False,
}

py_files = [
    ("pqheap.core.base", "pqheap/core/base.py"),
    ("pqheap.core.indexing", "pqheap/core/indexing.py"),
]


def create_extensions(py_files: list[tuple]) -> list[Extension]:
    """
    Create Cython extensions for the hot-path modules.

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
    extra_compile_args = [] if sys.platform == "win32" else ["-O3"]
    return [
        Extension(
            name=module_name,
            sources=[py_path],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        for module_name, py_path in py_files
    ]


def main() -> None:
    """Main setup function for compiling"""
    # Filter out non-existing files
    files = [
        (name, path)
        for name, path in py_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No modules found to compile")

    extensions = create_extensions(files)

    setup(
        name="pqheap",
        version="0.1.0",
        description="Array-backed binary and d-way priority queues",
        python_requires=">=3.9",
        install_requires=["numpy"],
        extras_require={"test": ["pytest"]},
        packages=find_packages(include=["pqheap", "pqheap.*"]),
        ext_modules=cythonize(
            extensions,
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        zip_safe=False
    )


if __name__ == "__main__":
    main()
