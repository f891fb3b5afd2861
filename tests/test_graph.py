import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from slnfgen.lib.graph import GraphLoadError, ProjectGraph, load_graph
from slnfgen.lib.project import ProjectNode


def _project(*refs: str, item: str = "ProjectReference") -> str:
    items = "\n".join(f'    <{item} Include="{ref}" />' for ref in refs)
    return (
        '<Project Sdk="Microsoft.NET.Sdk">\n'
        "  <ItemGroup>\n"
        f"{items}\n"
        "  </ItemGroup>\n"
        "</Project>\n"
    )


def _write(root: Path, relpath: str, text: str) -> Path:
    path = root / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestProjectGraph(unittest.TestCase):
    def test_traversal_tree_in_discovery_order(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            entry = _write(root, "dirs.proj", _project("src\\App\\App.csproj", "lib\\dirs.proj"))
            _write(
                root, "lib/dirs.proj",
                _project("Core\\Core.csproj;Util\\Util.csproj", item="ProjectFile"),
            )
            _write(root, "src/App/App.csproj", _project("..\\..\\lib\\Core\\Core.csproj"))
            _write(root, "lib/Core/Core.csproj", _project())
            _write(root, "lib/Util/Util.csproj", _project())

            nodes = load_graph(entry)

            self.assertEqual(
                [node.path for node in nodes],
                [
                    root / "dirs.proj",
                    root / "src" / "App" / "App.csproj",
                    root / "lib" / "Core" / "Core.csproj",
                    root / "lib" / "dirs.proj",
                    root / "lib" / "Util" / "Util.csproj",
                ],
            )
            self.assertEqual(
                [node.is_traversal for node in nodes],
                [True, False, False, True, False],
            )

    def test_globs_and_directory_properties(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            entry = _write(
                root, "dirs.proj",
                _project("$(MSBuildThisFileDirectory)src\\**\\*.csproj"),
            )
            _write(root, "src/B/B.csproj", _project())
            _write(root, "src/A/A.csproj", _project("$(MSBuildProjectDirectory)\\..\\B\\B.csproj"))
            _write(root, "src/A/notes.txt", "not a project")

            graph = ProjectGraph(entry)

            self.assertEqual(
                [node.path for node in graph.nodes()],
                [
                    root / "dirs.proj",
                    root / "src" / "A" / "A.csproj",
                    root / "src" / "B" / "B.csproj",
                ],
            )

    def test_missing_reference_is_a_dangling_node(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            entry = _write(root, "dirs.proj", _project("Gone\\Gone.csproj"))

            graph = ProjectGraph(entry)

            gone = ProjectNode.from_path(root / "Gone" / "Gone.csproj")
            self.assertIn(gone, list(graph.nodes()))
            self.assertIn(gone, graph.dangling())
            self.assertEqual(len(graph.dangling()), 1)

    def test_unknown_properties_are_skipped_with_a_warning(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            entry = _write(
                root, "dirs.proj",
                _project("$(RepoRoot)\\src\\A.csproj;Known\\Known.csproj"),
            )
            _write(root, "Known/Known.csproj", _project())

            out = io.StringIO()
            with redirect_stdout(out):
                nodes = load_graph(entry)

            self.assertEqual(
                [node.path for node in nodes],
                [root / "dirs.proj", root / "Known" / "Known.csproj"],
            )
            for node in nodes:
                self.assertNotIn("$(", str(node.path))
            warnings = out.getvalue().splitlines()
            self.assertEqual(len(warnings), 1)
            self.assertTrue(warnings[0].startswith("Warning"))
            self.assertIn("$(RepoRoot)", warnings[0])

    def test_cycles_terminate(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            entry = _write(root, "dirs.proj", _project("A.csproj"))
            _write(root, "A.csproj", _project("B.csproj"))
            _write(root, "B.csproj", _project("A.csproj"))

            nodes = load_graph(entry)

            self.assertEqual(
                [node.name for node in nodes], ["dirs", "A", "B"]
            )

    def test_non_project_file_fails(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            entry = _write(root, "dirs.proj", _project("Odd.csproj"))
            _write(root, "Odd.csproj", "<Solution />\n")

            with self.assertRaises(GraphLoadError) as ctx:
                load_graph(entry)
            self.assertEqual(ctx.exception.node.path, root / "Odd.csproj")


if __name__ == "__main__":
    unittest.main()
