"""Generator core: option resolution, file selection and collaborators."""
