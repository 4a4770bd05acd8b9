import pytest

from weiss.include import (
    IncludeError,
    IncludeInfo,
    IncludeType,
    find_path,
    find_standard_library_path,
    get_include_info,
    main,
    read_file,
)


def test_get_include_info_user():
    info = get_include_info('#include "include_test_data.h"')
    assert info == IncludeInfo(IncludeType.USER_CODE, "include_test_data.h")


def test_get_include_info_standard():
    info = get_include_info("  #include <vector>  ")
    assert info.type is IncludeType.STANDARD_LIBRARY
    assert info.file_name == "vector"


def test_get_include_info_other():
    info = get_include_info("int n = 42;")
    assert info.type is IncludeType.OTHER
    assert info.file_name == ""


@pytest.fixture
def project(tmp_path):
    stl = tmp_path / "stl"
    (stl / "bits").mkdir(parents=True)
    (stl / "bits" / "vector").write_text("// vector\n")
    src = tmp_path / "src"
    src.mkdir()
    (src / "data.h").write_text("int n = 42;\n")
    (src / "main.cpp").write_text(
        '#include "data.h"\n#include <bits/vector>\nint main()\n'
    )
    return src, stl


def test_find_standard_library_path(project):
    _, stl = project
    assert find_standard_library_path("bits/vector", stl) == stl / "bits" / "vector"


def test_find_standard_library_path_missing(project):
    _, stl = project
    with pytest.raises(IncludeError):
        find_standard_library_path("map", stl)


def test_find_path_user(project):
    src, stl = project
    assert find_path(src / "main.cpp", IncludeType.USER_CODE, "data.h", stl) == src / "data.h"


def test_read_file_expands(project):
    src, stl = project
    text = read_file(src / "main.cpp", stl)
    assert text == "int n = 42;\n// vector\nint main()\n"


def test_read_file_missing(tmp_path):
    with pytest.raises(IncludeError):
        read_file(tmp_path / "absent.cpp", tmp_path)


def test_main_too_many_arguments():
    with pytest.raises(ValueError):
        main(["a", "b"])


def test_main_prints(tmp_path, capsys):
    path = tmp_path / "plain.cpp"
    path.write_text("int x;\n")
    main([str(path)])
    assert capsys.readouterr().out == "int x;\n\n"