from setuptools import find_packages, setup

setup(
    name="desktop-actions",
    version="0.1.0",
    description="Cross-platform desktop actions - browser, executables, file manager, trash and shortcuts",
    packages=find_packages(include=["desktop_actions", "desktop_actions.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models and URL validation
        "send2trash",  # Cross-platform trash/recycle bin
        "pywin32; sys_platform == 'win32'",  # WScript.Shell .lnk shortcuts
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "rich",  # Console output for scripts/
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-setuptools",  # Type stubs
        ],
    },
)
