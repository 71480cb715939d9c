"""resultsgen: source generator for the Results<TResult1, ...> union type family."""

__version__ = "0.1.0"
