from .names import (
    TypeName, ClassName, PrimitiveName, as_type_name,
    VOID, BOOLEAN, BYTE, SHORT, INT, LONG, CHAR, FLOAT, DOUBLE, STRING,
)
from .context import Context
from .sinks import Sink, StringSink, StreamSink, IndentingSink
from .writables import Writable, HasClassReferences, Joiner, referenced_classes_of, write_to_string
from .snippets import Snippet
from .declarations import Modifier, AnnotationWriter, write_modifiers, write_annotations
from .body import (
    ClassBodyWriter, FieldWriter, MethodWriter, ConstructorWriter, VariableWriter, BlockWriter,
)
from .enum_writer import EnumWriter, ConstantWriter
from .specs import EnumSpec, ConstantSpec, build_enum

__all__ = [
    # names
    "TypeName", "ClassName", "PrimitiveName", "as_type_name",
    "VOID", "BOOLEAN", "BYTE", "SHORT", "INT", "LONG", "CHAR", "FLOAT", "DOUBLE", "STRING",
    # context & sinks
    "Context", "Sink", "StringSink", "StreamSink", "IndentingSink",
    # composition
    "Writable", "HasClassReferences", "Joiner", "referenced_classes_of", "write_to_string",
    "Snippet", "Modifier", "AnnotationWriter", "write_modifiers", "write_annotations",
    # writers
    "ClassBodyWriter", "FieldWriter", "MethodWriter", "ConstructorWriter", "VariableWriter",
    "BlockWriter", "EnumWriter", "ConstantWriter",
    # declarative
    "EnumSpec", "ConstantSpec", "build_enum",
]
