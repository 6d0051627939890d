"""Named services held together by a provider."""

from __future__ import annotations

import copy

from ledgenet.util.log import Log, Logger, LogLevel


class Service:
    """Something a :class:`ServiceProvider` can hold; knows its provider."""

    def __init__(self) -> None:
        self.provider: ServiceProvider | None = None

    def __copy__(self) -> Service:
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.provider = None
        return clone

    def __deepcopy__(self, memo: dict) -> Service:
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        for key, value in self.__dict__.items():
            setattr(clone, key, None if key == "provider" else copy.deepcopy(value, memo))
        return clone

    def attach(self, provider: ServiceProvider | None) -> None:
        """Move the service to *provider*, or detach it when *provider* is None."""
        if self.provider is not None:
            self.on_provider_removing()
        self.provider = provider
        if self.provider is not None:
            self.on_provider_added()

    def on_provider_added(self) -> None:
        """Called after the service is given a provider."""

    def on_provider_removing(self) -> None:
        """Called before the service leaves its provider."""


class ServiceProvider:
    """A registry of services looked up by name."""

    def __init__(self) -> None:
        self.services: dict[str, Service] = {}
        self.log: Log | None = None

    def init(self) -> None:
        """Prepare the provider for use."""
        self.log = Logger.instance().get_log("ServiceProvider")

    def has_service(self, name: str) -> bool:
        """Tell whether a service called *name* is held."""
        return name in self.services

    def add_service(self, name: str, service: Service) -> None:
        """Hold *service* under *name*; an existing service of that name is kept."""
        if name not in self.services:
            service.attach(self)
            self.services[name] = service

    def get_service(self, name: str) -> Service:
        """Return the service called *name*; raise KeyError if there is none."""
        try:
            return self.services[name]
        except KeyError:
            if self.log is not None:
                self.log.log_message(
                    f"Tried to get invalid service: {name}\n", LogLevel.ERROR
                )
                self.log.write()
            raise KeyError(name) from None

    def remove_service(self, name: str) -> Service:
        """Detach and return the service called *name*."""
        service = self.get_service(name)
        service.attach(None)
        del self.services[name]
        return service

    def destroy_service(self, name: str) -> None:
        """Detach and discard the service called *name*."""
        self.remove_service(name)