import setuptools
import os

own_dir = os.path.abspath(os.path.dirname(__file__))


def _read_requirements(fname: str):
    with open(os.path.join(own_dir, fname)) as f:
        for line in f.readlines():
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            yield line


def requirements():
    yield from _read_requirements('requirements.txt')


def test_requirements():
    yield from _read_requirements('requirements.test.txt')


def modules():
    return [
        'ctx',
        'version',
    ]


def packages():
    return setuptools.find_namespace_packages(
        include=('ccc', 'ci', 'devdocs'),
    )


def version():
    with open(os.path.join(own_dir, 'VERSION')) as f:
        return f.read().strip()


setuptools.setup(
    name='dev-docs-collector',
    version=version(),
    description='Collects developer-facing release notes from GitHub pull requests',
    python_requires='>=3.11',
    py_modules=modules(),
    packages=packages(),
    install_requires=list(requirements()),
    extras_require={
        'test': list(test_requirements()),
    },
)
