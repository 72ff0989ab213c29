"""Domain layer: view model, predicates, exceptions. No third-party imports."""
