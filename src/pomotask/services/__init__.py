"""Service layer: stateful objects built once per run and passed explicitly."""
