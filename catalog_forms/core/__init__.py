# catalog-forms - Core
# Pure form state, validation and calendar logic; no I/O here
