# setup.py
from setuptools import setup, find_packages

setup(
    name="yall",
    version="0.1.0",
    description="yall: a small lexically scoped Lisp with a reader, evaluator and language server",
    packages=find_packages(include=["yall", "yall.*", "yall_lsp", "yall_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6.80",
        ],
    },
    entry_points={
        "console_scripts": [
            "yall=yall.__main__:main",
            "yall-ls=yall_lsp.server:main",
            "yall-repl-server=yall_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
