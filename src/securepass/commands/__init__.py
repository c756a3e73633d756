"""Click plumbing shared by the securepass entry point."""
