"""Car dealership financing: loan quotes, financing options and vehicle-prefilled quotes."""
