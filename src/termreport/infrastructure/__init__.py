"""Infrastructure: default value dumper, trace formatter, logging setup."""
