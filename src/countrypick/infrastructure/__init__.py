"""Infrastructure layer - concrete collaborators behind the domain protocols."""
