"""Tests for tools module."""

import pytest
from jcodescan_mcp.storage import context_to_dict
from jcodescan_mcp.tools.analyze_folder import (
    analyze_files,
    analyze_folder,
    discover_local_files,
    find_specific_class_files,
    should_skip_file,
)
from jcodescan_mcp.tools.get_class_hierarchy import get_class_hierarchy
from jcodescan_mcp.tools.get_class_outline import get_class_outline
from jcodescan_mcp.tools.get_enums import get_enums
from jcodescan_mcp.tools.get_report import get_report
from jcodescan_mcp.tools.list_analyses import list_analyses
from jcodescan_mcp.tools.search_endpoints import search_endpoints


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("JCODESCAN_MAX_WORKERS", "JCODESCAN_MAX_FILES", "ANTHROPIC_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def analyzed(java_project, storage_dir):
    """Analyze the sample tree and return the storage path."""
    result = analyze_folder(str(java_project), storage_path=str(storage_dir))
    assert result["success"] is True
    return str(storage_dir)


def test_should_skip_file():
    """Test skip patterns."""
    assert should_skip_file("target/classes/A.java") is True
    assert should_skip_file("module/build/gen/A.java") is True
    assert should_skip_file(".git/objects/x") is True
    assert should_skip_file("src/main/java/A.java") is False
    assert should_skip_file("src/main/java/rebuild/A.java") is False


def test_discover_local_files(java_project):
    """Test discovery keeps Java files outside skipped directories."""
    files = discover_local_files(java_project)
    names = [p.name for p in files]

    assert names == ["Admin.java", "UserResource.java", "Entity.java", "User.java"]
    assert "Ignored.java" not in names


def test_discover_local_files_respects_max(java_project):
    """Test that max_files limit is respected."""
    assert len(discover_local_files(java_project, max_files=2)) == 2


def test_find_specific_class_files(java_project):
    """Test class filtering by file name."""
    names = [p.name for p in find_specific_class_files(java_project, "User")]
    assert sorted(names) == ["User.java"]

    names = [p.name for p in find_specific_class_files(java_project, "Resource")]
    assert names == ["UserResource.java"]


def test_analyze_files_model(java_project):
    """Test the resolved model built from the sample tree."""
    context = analyze_files(discover_local_files(java_project))

    assert context.stats() == {
        "package_count": 2,
        "class_count": 4,
        "method_count": 5,
        "endpoint_count": 3,
        "enum_count": 1,
    }
    assert context.units["com.acme.model.User"].superclass == "com.acme.model.Entity"
    assert context.units["com.acme.api.Admin"].superclass == "com.acme.model.User"
    assert context.units["com.acme.model.User"].subclasses == ["com.acme.api.Admin"]
    assert context.enums == {"com.acme.model.Role": ["ADMIN", "MEMBER"]}
    assert context.resolved is True


def test_analyze_files_worker_count_does_not_matter(java_project):
    """Test parallel extraction gives the same model as sequential."""
    files = discover_local_files(java_project)

    sequential = analyze_files(files, max_workers=1)
    parallel = analyze_files(files, max_workers=4)

    assert context_to_dict(parallel) == context_to_dict(sequential)


def test_analyze_files_is_idempotent(java_project):
    """Test analyzing the same input twice gives equal models."""
    files = discover_local_files(java_project)
    assert context_to_dict(analyze_files(files)) == context_to_dict(analyze_files(files))


def test_analyze_files_skips_unreadable(java_project, tmp_path):
    """Test a file that cannot be read is skipped with a warning."""
    files = discover_local_files(java_project) + [tmp_path / "Missing.java"]

    context = analyze_files(files)

    assert len(context.units) == 4
    assert len(context.warnings) == 1
    assert "Missing.java" in context.warnings[0]


def test_analyze_folder(java_project, storage_dir, tmp_path):
    """Test the full pipeline and its result dict."""
    out = tmp_path / "reports"
    result = analyze_folder(str(java_project), output_dir=str(out), storage_path=str(storage_dir))

    assert result["success"] is True
    assert result["repo"] == "local/shop"
    assert result["class_count"] == 4
    assert result["endpoint_count"] == 3
    assert result["file_count"] == 4
    assert result["report_count"] == 7
    assert (out / "api-summary.md").exists()
    assert (out / "method-details" / "com_acme_api_UserResource.md").exists()
    assert (storage_dir / "local-shop.json").exists()


def test_analyze_folder_specific_class(java_project, storage_dir):
    """Test analyzing a single class."""
    result = analyze_folder(str(java_project), specific_class="Entity", storage_path=str(storage_dir))

    assert result["success"] is True
    assert result["class_count"] == 1


def test_analyze_folder_errors(tmp_path, storage_dir):
    """Test missing, non-directory and empty inputs."""
    assert analyze_folder(str(tmp_path / "nope"), storage_path=str(storage_dir))["success"] is False

    a_file = tmp_path / "file.txt"
    a_file.write_text("x", encoding="utf-8")
    assert "not a directory" in analyze_folder(str(a_file), storage_path=str(storage_dir))["error"]

    empty = tmp_path / "empty"
    empty.mkdir()
    assert analyze_folder(str(empty), storage_path=str(storage_dir))["error"] == "No source files found"


def test_list_analyses(analyzed):
    """Test listing after one analysis."""
    result = list_analyses(storage_path=analyzed)

    assert result["count"] == 1
    assert result["analyses"][0]["repo"] == "local/shop"


def test_get_class_hierarchy(analyzed):
    """Test the hierarchy tool returns the nested forest."""
    result = get_class_hierarchy("shop", storage_path=analyzed)

    assert result["root_count"] == 2
    roots = {n["name"]: n for n in result["tree"]}
    entity = roots["com.acme.model.Entity"]
    assert entity["kind"] == "abstract"
    assert entity["children"][0]["name"] == "com.acme.model.User"
    assert entity["children"][0]["children"][0]["name"] == "com.acme.api.Admin"


def test_get_class_hierarchy_package_filter(analyzed):
    """Test filtering roots by package."""
    result = get_class_hierarchy("local/shop", package="com.acme.api", storage_path=analyzed)
    assert [n["name"] for n in result["tree"]] == ["com.acme.api.UserResource"]

    result = get_class_hierarchy("local/shop", package="com.acme", storage_path=analyzed)
    assert result["root_count"] == 2


def test_get_class_outline(analyzed):
    """Test outline of one class."""
    result = get_class_outline("shop", "UserResource", storage_path=analyzed)

    assert result["name"] == "com.acme.api.UserResource"
    assert result["is_rest_resource"] is True
    assert [m["name"] for m in result["methods"]] == ["list", "create", "get"]
    assert result["methods"][0]["summary"] == "Lists users."
    assert [e["path"] for e in result["endpoints"]] == ["/users", "/users", "/users/{id}"]


def test_get_class_outline_supertypes(analyzed):
    """Test superclass and subclass links in the outline."""
    result = get_class_outline("shop", "com.acme.model.User", storage_path=analyzed)

    assert result["superclass"] == "com.acme.model.Entity"
    assert result["superclass_known"] is True
    assert result["subclasses"] == ["com.acme.api.Admin"]
    assert result["interfaces"] == ["Serializable"]


def test_get_class_outline_missing(analyzed):
    """Test unknown classes and unknown analyses."""
    assert "error" in get_class_outline("shop", "Nope", storage_path=analyzed)
    assert "error" in get_class_outline("other", "User", storage_path=analyzed)


def test_search_endpoints(analyzed):
    """Test endpoint search and verb filtering."""
    result = search_endpoints("shop", query="id", storage_path=analyzed)
    assert [r["method"] for r in result["results"]] == ["get"]

    result = search_endpoints("shop", http_method="post", storage_path=analyzed)
    assert [r["method"] for r in result["results"]] == ["create"]

    result = search_endpoints("shop", storage_path=analyzed)
    assert result["result_count"] == 3


def test_get_enums(analyzed):
    """Test enum listing with a name filter."""
    result = get_enums("shop", storage_path=analyzed)
    assert result["enums"] == [{"name": "com.acme.model.Role", "values": ["ADMIN", "MEMBER"]}]

    assert get_enums("shop", query="color", storage_path=analyzed)["count"] == 0


def test_get_report(analyzed):
    """Test rendering reports on demand."""
    api = get_report("shop", "api", storage_path=analyzed)
    assert "/users/{id}" in api["markdown"]

    methods = get_report("shop", "methods", class_name="UserResource", storage_path=analyzed)
    assert methods["markdown"].startswith("# Methods for UserResource")

    assert "error" in get_report("shop", "methods", storage_path=analyzed)
    assert "error" in get_report("shop", "bogus", storage_path=analyzed)
