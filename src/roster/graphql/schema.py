"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig
from strawberry.types import ExecutionContext

from ..api.app import ensure_store_connected
from ..errors import RosterError
from ..logging import get_logger
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class RosterSchema(strawberry.Schema):
    """Schema that reports resolver errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        operation = execution_context.operation_name if execution_context else None
        for error in errors:
            original = error.original_error
            if isinstance(original, RosterError):
                logger.info(
                    "GraphQL operation rejected",
                    operation=operation,
                    code=original.code,
                    fields=original.fields or None,
                    error=error.message,
                )
            else:
                logger.error(
                    "GraphQL execution error",
                    operation=operation,
                    path=error.path,
                    error=error.message,
                    exc_info=original,
                )


# Field and argument names are part of the public API and stay as declared
schema = RosterSchema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(auto_camel_case=False),
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        await ensure_store_connected(request.app)
        return {
            "request": request,
            "store": request.app.state.store,
            "hasher": request.app.state.hasher,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
