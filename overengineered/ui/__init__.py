"""Box-based layout elements for the terminal UI."""