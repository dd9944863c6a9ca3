"""Host adapters embedding the formatting engine into UI toolkits."""
