# catalog-forms - Atomic components
