# setup.py
from setuptools import setup, find_packages

setup(
    name="fig",
    version="0.4.0",
    description="Interpreter for Fig, a terse code-golf stack language",
    packages=find_packages(include=["fig", "fig.*", "fig_lsp", "fig_lsp.*"]),
    package_data={"fig": ["data/dict.txt"]},
    python_requires=">=3.10",
    extras_require={
        "lsp": ["pygls>=1.1,<2", "lsprotocol"],
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "fig=fig.__main__:main",
            "fig-ls=fig_lsp.server:main",
        ],
    },
    zip_safe=False,
)
