"""Unit tests for the Todo entity."""

from uuid import uuid4

import pytest

from todolist.domain.todo import InvalidTodoError, Todo


class TestTodoCreate:
    def test_defaults(self):
        owner = uuid4()
        todo = Todo.create(owner_id=owner, title="  Buy milk  ")

        assert todo.owner_id == owner
        assert todo.title == "Buy milk"
        assert todo.content is None
        assert todo.completed is False

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_title_required(self, title):
        with pytest.raises(InvalidTodoError, match="Title is required"):
            Todo.create(owner_id=uuid4(), title=title)

    def test_title_max_length(self):
        Todo.create(owner_id=uuid4(), title="t" * 255)

        with pytest.raises(InvalidTodoError, match="255"):
            Todo.create(owner_id=uuid4(), title="t" * 256)

    def test_content_max_length(self):
        Todo.create(owner_id=uuid4(), title="ok", content="c" * 1000)

        with pytest.raises(InvalidTodoError, match="1000"):
            Todo.create(owner_id=uuid4(), title="ok", content="c" * 1001)


class TestTodoApplyChanges:
    def setup_method(self):
        self.todo = Todo.create(owner_id=uuid4(), title="Original", content="Body")

    def test_omitted_fields_unchanged(self):
        self.todo.apply_changes(completed=True)

        assert self.todo.title == "Original"
        assert self.todo.content == "Body"
        assert self.todo.completed is True

    def test_empty_content_clears(self):
        self.todo.apply_changes(content="")

        assert self.todo.content is None

    def test_invalid_change_is_not_partially_applied(self):
        with pytest.raises(InvalidTodoError):
            self.todo.apply_changes(title="New", content="c" * 1001)

        assert self.todo.title == "Original"
        assert self.todo.content == "Body"

    def test_blank_title_rejected(self):
        with pytest.raises(InvalidTodoError):
            self.todo.apply_changes(title="   ")
