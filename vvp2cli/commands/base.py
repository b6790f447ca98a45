"""Base command class for all CLI commands."""

from __future__ import annotations

import argparse
import functools
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, ClassVar, Optional, TypeVar

from pydantic import BaseModel

from vvp2cli.core.api_client import APIClient, ResourceCollection
from vvp2cli.core.config import Config
from vvp2cli.core.loader import load_resource
from vvp2cli.errors import (
    APIError,
    ConfigError,
    InvalidResponseError,
    RequestFailedError,
    VVPError,
)
from vvp2cli.ui.console import print_error, print_output, print_success
from vvp2cli.ui.formatter import render
from vvp2cli.ui.spinners import create_spinner
from vvp2cli.ui.views import ResourceView

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseCommand:
    """Base class for a top-level command and its actions.

    Subclasses declare their actions in ``register`` and implement one
    method per action. ``execute`` looks the method up from the parsed
    arguments and turns any ``VVPError`` into an error message.
    """

    name: ClassVar[str] = "base"
    description: ClassVar[str] = "Base command"
    aliases: ClassVar[list[str]] = []
    # Commands that never talk to the platform run without a resolved config
    requires_config: ClassVar[bool] = True

    def __init__(self, config: Optional[Config] = None, api: Optional[APIClient] = None):
        self.config = config
        self._api = api

    @property
    def api(self) -> APIClient:
        """Lazy-initialize the API client."""
        if self._api is None:
            self._api = APIClient(self.config)
        return self._api

    @classmethod
    def register(
        cls,
        subparsers: argparse._SubParsersAction,
        common: argparse.ArgumentParser,
    ) -> argparse.ArgumentParser:
        """Add this command's parser to the top-level subcommands."""
        parser = subparsers.add_parser(
            cls.name,
            aliases=cls.aliases,
            help=cls.description,
            description=cls.description,
            parents=[common],
        )
        parser.set_defaults(command_cls=cls, handler_name="run")
        return parser

    @staticmethod
    def add_actions(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
        return parser.add_subparsers(dest="action", metavar="ACTION", required=True)

    @classmethod
    def add_action(
        cls,
        actions: argparse._SubParsersAction,
        name: str,
        common: argparse.ArgumentParser,
        help: str,
        aliases: Optional[list[str]] = None,
    ) -> argparse.ArgumentParser:
        parser = actions.add_parser(
            name, aliases=aliases or [], help=help, description=help, parents=[common]
        )
        parser.set_defaults(handler_name=name.replace("-", "_"))
        return parser

    def execute(self, args: argparse.Namespace) -> bool:
        """Run the selected action. Returns False if it failed."""
        handler = getattr(self, args.handler_name)
        try:
            handler(args)
        except VVPError as e:
            print_error(str(e))
            return False
        finally:
            if self._api is not None:
                self._api.close()
        return True

    # Helpers shared by the resource commands

    def namespace(self, args: argparse.Namespace) -> str:
        if self.config is None:
            raise ConfigError("configuration not loaded")
        return self.config.effective_namespace(getattr(args, "namespace", None))

    @property
    def output_format(self) -> str:
        return self.config.output_format if self.config is not None else "table"

    def emit(self, value: Any, view: Optional[ResourceView] = None) -> None:
        print_output(render(value, self.output_format, view))

    def load(self, path: str | Path, model: type[ModelT], namespace: Optional[str] = None) -> ModelT:
        """Load a resource file, filling in ``metadata.namespace`` when missing."""
        resource = load_resource(path, model)
        metadata = getattr(resource, "metadata", None)
        if namespace and metadata is not None and not getattr(metadata, "namespace", None):
            metadata.namespace = namespace
        return resource

    def notify(self, message: str) -> None:
        print_success(message)


@contextmanager
def error_context(action: str) -> Iterator[None]:
    """Prefix platform errors raised inside the block with what was being done.

    Local problems (config, input) are reported as they are.
    """
    try:
        yield
    except (APIError, RequestFailedError, InvalidResponseError) as e:
        raise e.with_prefix(f"failed to {action}")


def context(action: str) -> Callable[[Callable[..., None]], Callable[..., None]]:
    """Decorator form of ``error_context`` for action methods."""

    def decorate(func: Callable[..., None]) -> Callable[..., None]:
        @functools.wraps(func)
        def wrapper(self: BaseCommand, args: argparse.Namespace) -> None:
            with error_context(action):
                func(self, args)

        return wrapper

    return decorate


class ResourceCommand(BaseCommand):
    """list/get/create/update/delete for a kind backed by one ``ResourceCollection``.

    ``update`` replaces the resource (PUT) unless a subclass says otherwise.
    """

    collection: ClassVar[str] = ""
    model: ClassVar[type[BaseModel]]
    view: ClassVar[ResourceView]
    label: ClassVar[str] = "resource"
    namespaced: ClassVar[bool] = True

    @classmethod
    def register(cls, subparsers, common):
        parser = super().register(subparsers, common)
        actions = cls.add_actions(parser)
        title = cls.label.capitalize()

        cls.add_action(actions, "list", common, f"List {cls.view.plural}", aliases=["ls"])

        get = cls.add_action(actions, "get", common, f"Show a {cls.label}")
        get.add_argument("name", help=f"{title} name")

        create = cls.add_action(actions, "create", common, f"Create a {cls.label} from a file")
        create.add_argument("-f", "--file", required=True, help="JSON or YAML resource file")

        update = cls.add_action(actions, "update", common, f"Update a {cls.label} from a file")
        update.add_argument("name", help=f"{title} name")
        update.add_argument("-f", "--file", required=True, help="JSON or YAML resource file")

        delete = cls.add_action(actions, "delete", common, f"Delete a {cls.label}", aliases=["rm"])
        delete.add_argument("name", help=f"{title} name")

        cls.add_extra_actions(actions, common)
        return parser

    @classmethod
    def add_extra_actions(
        cls, actions: argparse._SubParsersAction, common: argparse.ArgumentParser
    ) -> None:
        """Hook for kinds with more than the standard actions."""

    @property
    def resources(self) -> ResourceCollection:
        return getattr(self.api, self.collection)

    def scope(self, args: argparse.Namespace) -> Optional[str]:
        return self.namespace(args) if self.namespaced else None

    def list(self, args: argparse.Namespace) -> None:
        scope = self.scope(args)
        with error_context(f"list {self.view.plural}"):
            with create_spinner(f"Fetching {self.view.plural}..."):
                result = self.resources.list(scope)
        self.emit(result.items, self.view)

    def get(self, args: argparse.Namespace) -> None:
        scope = self.scope(args)
        with error_context(f"get {self.label}"):
            with create_spinner(f"Fetching {self.label} {args.name}..."):
                item = self.resources.get(scope, args.name)
        self.emit(item, self.view)

    def create(self, args: argparse.Namespace) -> None:
        scope = self.scope(args)
        body = self.load(args.file, self.model, scope)
        with error_context(f"create {self.label}"):
            with create_spinner(f"Creating {self.label}..."):
                created = self.resources.create(scope, body)
        self.notify(f"{self.label.capitalize()} '{created.metadata.name}' created successfully")
        self.emit(created, self.view)

    def update(self, args: argparse.Namespace) -> None:
        scope = self.scope(args)
        body = self.load(args.file, self.model, scope)
        with error_context(f"update {self.label}"):
            with create_spinner(f"Updating {self.label} {args.name}..."):
                updated = self.send_update(scope, args.name, body)
        self.notify(f"{self.label.capitalize()} '{args.name}' updated successfully")
        self.emit(updated, self.view)

    def send_update(self, scope: Optional[str], name: str, body: BaseModel) -> BaseModel:
        return self.resources.replace(scope, name, body)

    def delete(self, args: argparse.Namespace) -> None:
        scope = self.scope(args)
        with error_context(f"delete {self.label}"):
            with create_spinner(f"Deleting {self.label} {args.name}..."):
                self.resources.delete(scope, args.name)
        self.notify(f"{self.label.capitalize()} '{args.name}' deleted successfully")
