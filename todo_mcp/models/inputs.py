"""Input models for the to-do MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_mcp.enums import ListScope, ResponseFormat, TaskStatus


class AddTodoInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(..., description="Task text (required)", min_length=1, max_length=1000)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task text cannot be empty")
        if "\n" in v or "\r" in v:
            raise ValueError("Task text must be a single line")
        return v.strip()


class ToggleTodoInput(BaseModel):
    """Input model for marking a task done or not done."""

    number: int = Field(
        ...,
        description="1-based position of the task in the list it currently lives in",
        ge=1,
    )
    done: bool = Field(
        default=True,
        description="True moves pending task #number to done; False moves done task #number back to pending",
    )


class ListTodosInput(BaseModel):
    """Input model for listing tasks."""

    status: ListScope = Field(
        default=ListScope.ALL,
        description="Which list to show: pending, done, or all",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise', or 'json'",
    )


class GetTodoInput(BaseModel):
    """Input model for getting a single task."""

    status: TaskStatus = Field(default=TaskStatus.PENDING, description="List the task lives in: pending or done")
    number: int = Field(..., description="1-based position of the task in that list", ge=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise', or 'json'",
    )
