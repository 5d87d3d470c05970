"""Infrastructure layer - configuration, logging and content stores."""
