"""Tests for the language registry and Java patterns."""

import pytest
from jcodescan_mcp.parser import JAVA_SPEC, LANGUAGE_EXTENSIONS, LANGUAGE_REGISTRY


def test_registry():
    """Test Java is registered by extension and name."""
    assert LANGUAGE_EXTENSIONS[".java"] == "java"
    assert LANGUAGE_REGISTRY["java"] is JAVA_SPEC
    assert JAVA_SPEC.lookbehind == 100


def test_http_verbs():
    """Test the supported verb annotations."""
    assert set(JAVA_SPEC.http_method_annotations) == {"GET", "POST", "PUT", "DELETE"}


@pytest.mark.parametrize("line,name", [
    ("    public void run() {", "run"),
    ("    private static int count(String s, int n) {", "count"),
    ("    protected List<Map<String, Object>> rows() {", "rows"),
    ("    public String[] names() throws IOException, SQLException {", "names"),
    ("    void pkgPrivate() {", "pkgPrivate"),
])
def test_method_pattern_matches(line, name):
    """Test declaration shapes the method pattern accepts."""
    match = JAVA_SPEC.method_pattern.search("\n" + line)
    assert match is not None
    assert match.group(1) == name


@pytest.mark.parametrize("line", [
    "    public abstract void run();",
    "    int x = compute(1);",
    "    foo.bar(baz) {",
])
def test_method_pattern_rejects(line):
    """Test shapes that are not method declarations."""
    assert JAVA_SPEC.method_pattern.search("\n" + line) is None


def test_annotation_pattern():
    """Test annotation name and arguments groups."""
    match = JAVA_SPEC.annotation_pattern.search('@Path("/a/{b}")')
    assert match.group(1) == "Path"
    assert match.group(2) == '"/a/{b}"'


def test_doc_comment_pattern_spans_lines():
    """Test doc comments across lines."""
    match = JAVA_SPEC.doc_comment_pattern.search("/**\n * One.\n * Two.\n */")
    assert "One." in match.group(1)
    assert "Two." in match.group(1)
