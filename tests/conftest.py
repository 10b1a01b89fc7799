"""Pytest configuration and shared fixtures for the conceptmd test suite."""

import os

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass

from conceptmd.parsers import ConceptMarkdownParser


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def parser() -> ConceptMarkdownParser:
    """Provide a parser with default options."""
    return ConceptMarkdownParser()


@pytest.fixture
def sample_text() -> str:
    """Provide a document exercising every element kind.

    Returns
    -------
    str
        Sample dialect text

    """
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.
See [the docs](https://example.com/docs) or the [cache](@concept-cache) concept.

## Lists

- Item 1
   - Nested under 1
- Item 2

1. First item
2. Second item

<!-- reviewer: check the numbers -->

```python
def hello_world():
    print("Hello, World!")
```
"""
