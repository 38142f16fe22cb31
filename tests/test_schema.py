from app.graphql.schema import schema


def _fields(type_name: str) -> set[str]:
    return set(schema._schema.get_type(type_name).fields)


def test_queries_and_mutations_are_partitioned():
    assert set(schema._schema.query_type.fields) == {"todos", "users", "todo"}
    assert set(schema._schema.mutation_type.fields) == {
        "createTodo",
        "updateTodo",
        "deleteTodo",
        "createUser",
    }


def test_entity_shapes():
    assert _fields("Todo") == {"id", "text", "done", "userID", "user"}
    assert _fields("User") == {"id", "name"}


def test_input_shapes():
    assert _fields("NewTodo") == {"text", "userId"}
    assert _fields("EditTodo") == {"id", "text"}
    assert _fields("NewUser") == {"name"}
    assert _fields("FetchTodo") == {"id"}


def test_delete_todo_takes_an_id():
    (arg,) = schema._schema.mutation_type.fields["deleteTodo"].args.items()
    assert arg[0] == "input"
    assert str(arg[1].type) == "Int!"
