"""Built-in demo documents."""

from typing import List

from .core.engine import SearchEngine
from .core.batch import ParsedLine

SAMPLE_DOCUMENTS: List[ParsedLine] = [
    ParsedLine(
        title="Introduction to C++ Programming",
        content=(
            "C++ is a powerful and versatile programming language. It is used to develop "
            "operating systems, games, desktop applications and much more. C++ supports "
            "object-oriented programming."
        ),
        url="https://example.com/cpp-intro"
    ),
    ParsedLine(
        title="Search Algorithms",
        content=(
            "Search algorithms are fundamental in computer science. They include linear "
            "search, binary search, and more complex algorithms like those used in web "
            "search engines."
        ),
        url="https://example.com/search-algorithms"
    ),
    ParsedLine(
        title="Data Structures in C++",
        content=(
            "Data structures are essential for organizing and managing data efficiently. "
            "In C++ we have arrays, vectors, maps, sets and many other useful data structures."
        ),
        url="https://example.com/data-structures"
    ),
    ParsedLine(
        title="Machine Learning with Python",
        content=(
            "Python is the most popular language for machine learning. Libraries like "
            "TensorFlow, PyTorch and scikit-learn make it easy to implement machine "
            "learning algorithms."
        ),
        url="https://example.com/ml-python"
    ),
    ParsedLine(
        title="Web Development with JavaScript",
        content=(
            "JavaScript is essential for modern web development. It allows you to create "
            "interactive user interfaces and dynamic web applications. It is used in both "
            "frontend and backend."
        ),
        url="https://example.com/js-web"
    ),
]


def load_sample_documents(engine: SearchEngine) -> int:
    """Add the demo documents to an engine and return how many were added."""
    for document in SAMPLE_DOCUMENTS:
        engine.add_document(document.title, document.content, document.url)
    return len(SAMPLE_DOCUMENTS)
