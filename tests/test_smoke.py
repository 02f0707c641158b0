from cppcodegen import AccessSpecifier, Block, Class, Snippet


def test_class_with_public_and_private_members():
    cls = Class("Foo")
    cls.add("int x;", AccessSpecifier.PUBLIC)
    cls.add("int y;", AccessSpecifier.PRIVATE)
    assert cls.render() == (
        "class Foo {\n"
        " public:\n"
        "  int x;\n"
        " private:\n"
        "  int y;\n"
        "};\n"
    )


def test_header_file_roundtrip():
    includes = Snippet.system_include()
    includes.add(["string", "vector"])
    local = Snippet.local_include("app/")
    local.add("config.h")

    cls = Class("Widget")
    cls.add(["Widget();", "std::string name() const;"], AccessSpecifier.PUBLIC)
    cls.add("std::vector<int> ids_;")

    ns = Block.namespace("app")
    ns.add(cls)

    code = includes.render() + local.render() + ns.render()
    assert code == (
        "#include <string>\n"
        "#include <vector>\n"
        '#include "app/config.h"\n'
        "namespace app {\n"
        "  class Widget {\n"
        "   public:\n"
        "    Widget();\n"
        "    std::string name() const;\n"
        "   private:\n"
        "    std::vector<int> ids_;\n"
        "  };\n"
        "}\n"
    )


def test_function_definition():
    fn = Block.definition("int main()")
    fn.add("return 0;")
    assert fn.render() == "int main() {\n  return 0;\n}\n"
