"""ProjectKit.

This package aggregates project configuration for AI-agent tooling: agent
instructions, skills, MCP server definitions, workflows and documentation
standards are resolved from URI-addressed sources, parsed, validated and
persisted into a project-local store.

High-level architecture
-----------------------

- ``projectkit.source``:

  - A scheme-based driver registry that turns opaque ``scheme://...`` URIs
    into read-only filesystem views.
  - The reference ``local://`` driver and entry-point based driver discovery.

- ``projectkit.resource``:

  - The generic loader skeleton (discover, parse, validate) shared by every
    resource kind.
  - Config-driven aggregation across multiple sources.
  - The filesystem-backed repository used to persist resources.

- ``projectkit.ai`` / ``projectkit.doc``:

  - Resource kinds: instructions, skills, MCP servers, workflows and
    documentation standards, each with its models, errors, loader and
    repository.

- ``projectkit.rulebook`` / ``projectkit.project``:

  - Bundled rulebooks and the project configuration file.

- ``projectkit.fs``:

  - The small filesystem capability every other layer depends on.
"""
