"""CREATE TABLE parsing."""

import pytest

from mini_dbase.engine.config import DbaseOptions
from mini_dbase.engine.errors import DbaseSyntaxError
from mini_dbase.sql.ast_nodes import Attribute, DataType, TypeDefinition
from mini_dbase.sql.ddl_parser import parse_create_table


def test_users_schema(users_ddl):
    stmt = parse_create_table(users_ddl)
    assert stmt.table_name == "users"
    assert [c.name for c in stmt.columns] == ["id", "login", "password_hash", "is_admin"]

    id_col, login, pw, admin = stmt.columns
    assert id_col.type == TypeDefinition(DataType.INT32)
    assert id_col.attributes == {Attribute.KEY, Attribute.AUTOINCREMENT}
    assert id_col.default_value is None

    assert login.type == TypeDefinition(DataType.STRING, 32)
    assert login.attributes == {Attribute.UNIQUE}

    assert pw.type == TypeDefinition(DataType.BYTES, 8)
    assert pw.attributes == set()

    assert admin.type.type is DataType.BOOL
    assert admin.default_value == "false"


def test_parse_is_deterministic(users_ddl):
    assert parse_create_table(users_ddl) == parse_create_table(users_ddl)


def test_keywords_and_names_case_insensitive():
    stmt = parse_create_table("create TABLE t ({KEY, AutoIncrement} a: INT32, b: Bool, c: STRING, d: Bytes[4])")
    types = [c.type.type for c in stmt.columns]
    assert types == [DataType.INT32, DataType.BOOL, DataType.STRING, DataType.BYTES]
    assert stmt.columns[0].attributes == {Attribute.KEY, Attribute.AUTOINCREMENT}


def test_whitespace_insensitive():
    stmt = parse_create_table("  CREATE   TABLE\tt\n(\n {  key ,unique } a :int32 [ 4 ] =  7  ,b:string)  ")
    a, b = stmt.columns
    assert a.type == TypeDefinition(DataType.INT32, 4)
    assert a.default_value == "7"
    assert b.type == TypeDefinition(DataType.STRING)


def test_duplicate_attributes_are_deduplicated():
    stmt = parse_create_table("CREATE TABLE t ({key, key, unique, KEY} a: int32)")
    assert stmt.columns[0].attributes == {Attribute.KEY, Attribute.UNIQUE}


def test_default_value_is_raw_text():
    stmt = parse_create_table('CREATE TABLE t (a: int32 = abc, b: string = "x y")')
    # 建表时不做类型检查
    assert stmt.columns[0].default_value == "abc"
    assert stmt.columns[1].default_value == '"x y"'


def test_unknown_attribute():
    with pytest.raises(DbaseSyntaxError) as exc:
        parse_create_table("CREATE TABLE t ({key, primary} a: int32)")
    assert "Unknown attribute 'primary'" in str(exc.value)
    assert exc.value.position == 22


def test_unknown_type():
    with pytest.raises(DbaseSyntaxError) as exc:
        parse_create_table("CREATE TABLE t (a: float)")
    assert "Unknown data type 'float'" in str(exc.value)
    assert "at position 19" in str(exc.value)


def test_missing_create_keyword():
    with pytest.raises(DbaseSyntaxError, match="Expected keyword 'CREATE'"):
        parse_create_table("CREAT TABLE t (a: int32)")


def test_missing_table_keyword():
    with pytest.raises(DbaseSyntaxError, match="Expected keyword 'TABLE'"):
        parse_create_table("CREATE tables t (a: int32)")


def test_zero_columns_rejected():
    with pytest.raises(DbaseSyntaxError, match="Expected identifier"):
        parse_create_table("CREATE TABLE t ()")


def test_missing_colon():
    with pytest.raises(DbaseSyntaxError, match="Expected ':' after column name"):
        parse_create_table("CREATE TABLE t (a int32)")


def test_missing_size():
    with pytest.raises(DbaseSyntaxError, match="Expected type size"):
        parse_create_table("CREATE TABLE t (a: string[])")


def test_unclosed_size():
    with pytest.raises(DbaseSyntaxError, match="Expected ']'"):
        parse_create_table("CREATE TABLE t (a: string[3)")


def test_unclosed_attributes():
    with pytest.raises(DbaseSyntaxError, match="Expected '}'"):
        parse_create_table("CREATE TABLE t ({key a: int32)")


def test_unterminated_column_list():
    with pytest.raises(DbaseSyntaxError, match="Unexpected end of input"):
        parse_create_table("CREATE TABLE t (a: int32")


def test_bad_separator():
    with pytest.raises(DbaseSyntaxError, match="Expected ',' or '\\)'"):
        parse_create_table("CREATE TABLE t (a: int32; b: bool)")


def test_duplicate_column_name():
    with pytest.raises(DbaseSyntaxError, match="Duplicate column name 'a'"):
        parse_create_table("CREATE TABLE t (a: int32, a: bool)")


def test_trailing_semicolon():
    assert parse_create_table("CREATE TABLE t (a: int32);").table_name == "t"
    with pytest.raises(DbaseSyntaxError, match="Unexpected trailing input"):
        parse_create_table("CREATE TABLE t (a: int32);", DbaseOptions(allow_trailing_semicolon=False))
    with pytest.raises(DbaseSyntaxError, match="Unexpected trailing input"):
        parse_create_table("CREATE TABLE t (a: int32) extra")


def test_empty_default_means_no_default():
    stmt = parse_create_table("CREATE TABLE t (a: int32 = , b: bool)")
    assert stmt.columns[0].default_value is None
