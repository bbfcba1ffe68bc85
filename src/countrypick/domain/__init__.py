"""Domain layer - value types, events and collaborator protocols.

This layer contains:
- types: CandidatePool, SessionState, DropdownState
- events: Session events and the event bus
- protocols: Interfaces the engine expects from its collaborators

The domain layer has no dependencies on application, infrastructure, or presentation layers.
"""
