theme_name = "gruvbox"
# Example user theme. Copy this file to ~/hector/config/themes/ and tweak the
# palette to your liking; it shows up in the Ctrl-T theme cycle.
theme_data = {
    # Gruvbox-like dark background
    "bg": (40, 40, 40),            # ~ #282828
    # plain text
    "text": (235, 219, 178),       # ~ #EBDBB2
    "keyword": (251, 73, 52),      # ~ #FB4934
    "string": (184, 187, 38),      # ~ #B8BB26
    "number": (211, 134, 155),     # ~ #D3869B
    "comment": (146, 131, 116),    # ~ #928374
    "function": (250, 189, 47),    # ~ #FABD2F
    "operator": (254, 128, 25),    # ~ #FE8019
    "name": (235, 219, 178),       # ~ #EBDBB2
    # status bar
    "status_bg": (80, 73, 69),     # ~ #504945
    "status_fg": (235, 219, 178),  # ~ #EBDBB2
}
