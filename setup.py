#!/usr/bin/env python3
from __future__ import annotations

import re
import setuptools
import pathlib
import sys
import toml

__minver__ = '3.8'
__slogan__ = 'Base58 encoding of binary data over an alphabet without ambiguous characters.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Security :: Cryptography',
    'Topic :: Utilities',
]
__buildtools__ = {'setuptools', 'wheel', 'toml'}


def get_config():
    sys.path.insert(0, str(pathlib.Path(__file__).parent.absolute()))

    import alphabase

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = pathlib.Path(__file__).parent.joinpath('README.md')
        with open(filename, 'r', encoding='UTF8') as README:
            return README.read()

    def get_setup_common() -> dict:
        return dict(
            version=alphabase.__version__,
            long_description=get_setup_readme(),
            description=__slogan__,
            long_description_content_type='text/markdown',
            python_requires=F'>={__minver__}',
            classifiers=__topics__,
        )

    def requirement_name(requirement: str):
        return re.split(R'[\s<>=!~;\[]', requirement, maxsplit=1)[0].lower()

    ppcfg: dict[str, dict[str, list[str]]] = toml.load('pyproject.toml')
    requirements = [
        requirement for requirement in ppcfg['build-system']['requires']
        if requirement_name(requirement) not in __buildtools__
    ]

    config = get_setup_common()
    config.update(
        name=alphabase.__distribution__,
        packages=setuptools.find_packages(include=('alphabase*',)),
        install_requires=requirements,
        extras_require={'test': ['flake8', 'pytest']},
        include_package_data=True,
    )

    return config


if __name__ == '__main__':
    setuptools.setup(**get_config())
