"""symsync - reconcile declared symbolic links across sibling directories."""
