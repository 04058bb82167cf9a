"""Usage text for aliases is generated when flags are registered. To customize it,
configure multiflag before defining any flags, or pass a config to a single call.

Usage:
`python ./03_alias_usage.py --help`
"""

import multiflag

multiflag.configure(alias_usage=lambda canonical, alias: f"Shorthand for -{canonical}")

include = multiflag.collecting("include", "none", "Include a directory", "I")

# Per-call config, only affects this flag.
exclude = multiflag.collecting(
    "exclude",
    "none",
    "Exclude a directory",
    "X",
    config=multiflag.RegistrationConfig(alias_usage=lambda canonical, alias: "Same"),
)

if __name__ == "__main__":
    multiflag.parse()
    print("Include:", include.values())
    print("Exclude:", exclude.values())
