"""Infrastructure: implementations of application collaborator protocols."""
