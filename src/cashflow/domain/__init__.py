"""Domain contracts: predicates, the entity store boundary and repository protocols."""
