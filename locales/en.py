"""English strings for the Pitchside bot."""

EN_STRINGS = {
    # === WELCOME ===
    "welcome": (
        "<b>Pitchside</b> ⚽\n\n"
        "Find pick-up football battles near you, join in a tap, "
        "and keep track of your schedule."
    ),
    "welcome_back": "Hello, {name}!",
    "btn_register": "Create account",
    "btn_sign_in": "Sign in",
    "btn_forgot": "Forgot password",

    # === MAIN MENU ===
    "menu_header": "What would you like to do?",
    "tab_games_admin": "⚽ Upload Games",
    "tab_games_player": "⚽ Find Battles",
    "tab_schedule": "\U0001f4c5 Schedule",
    "tab_settings": "\U0001f464 Settings",
    "btn_back": "← Menu",

    # === REGISTRATION ===
    "ask_forename": "What's your first name?",
    "ask_surname": "And your surname?",
    "ask_email": "Your email address:",
    "ask_password": (
        "Choose a password (at least 8 characters, one uppercase letter and one number).\n"
        "<i>I'll delete your message straight away.</i>"
    ),
    "registered": (
        "Registration success! A verification email has been sent to your email address. "
        "Please verify before logging in."
    ),

    # === SIGN IN ===
    "ask_sign_in_email": "Email:",
    "ask_sign_in_password": "Password:\n<i>I'll delete your message straight away.</i>",
    "ask_reset_email": "Enter your email and I'll send a reset link:",
    "reset_sent": "A password reset link has been sent to the email you entered.",

    # === GAMES: PLAYER ===
    "no_live_matches": "No battles scheduled right now. Check back soon!",
    "joined_badge": "✅ Joined",
    "full_badge": "⛔ Full",
    "btn_join": "Join",
    "btn_cancel_spot": "Cancel my spot",
    "btn_map": "\U0001f4cd Map",
    "confirm_join": "Join <b>{name}</b>?\nPrice per player: £{price}",
    "confirm_cancel": "Cancel your spot in <b>{name}</b>?",
    "btn_confirm": "Confirm",
    "btn_keep": "Back",
    "joined": "You have joined the game! See you on {date}.",
    "cancelled": "Your spot in {name} has been cancelled.",

    # === GAMES: ADMIN ===
    "create_intro": "<b>Upload a new match</b>\n\nMatch name:",
    "ask_capacity": "How many players (capacity)?",
    "ask_date_time": "Date and time (DD/MM/YYYY HH:MM):",
    "ask_location": "Address of the pitch:",
    "location_found": "\U0001f4cd Found: {lat:.5f}, {lon:.5f}",
    "ask_venue_price": "Venue price (£):",
    "ask_price_per_player": "Price per player (£):",
    "ask_gender": "Gender category:",
    "ask_description": "Short description:",
    "ask_image": "Send a photo for the match card:",
    "create_preview": "<b>Preview</b>\n\n{card}\n\nUpload this match?",
    "btn_upload": "Upload",
    "btn_discard": "Discard",
    "created": "Match uploaded successfully!",
    "discarded": "Draft discarded.",
    "bad_number": "Please enter a number.",
    "bad_capacity": "Capacity must be a whole number between 1 and {max}.",
    "bad_date": "Please use the format DD/MM/YYYY HH:MM, e.g. 24/01/2025 19:30",
    "bad_photo": "Please send a photo.",

    # === SCHEDULE ===
    "schedule_admin_header": "<b>Live matches</b>",
    "schedule_player_header": "<b>Your battles</b>",
    "no_joined_matches": "You haven't joined any battles yet.",
    "btn_archive": "Archive",
    "archived": "{name} archived. It is hidden from all listings.",

    # === SETTINGS ===
    "settings_header": (
        "<b>Settings</b>\n\n"
        "Name: {forename} {surname}\n"
        "Email: {email}\n"
        "Role: {role}"
    ),
    "btn_edit_profile": "Edit name",
    "btn_feedback": "Send feedback",
    "btn_inbox": "Unread feedback ({count})",
    "btn_sign_out": "Sign out",
    "btn_delete_account": "Delete account",
    "ask_new_forename": "Current first name: <b>{current}</b>\nNew first name:",
    "ask_new_surname": "Current surname: <b>{current}</b>\nNew surname:",
    "profile_updated": "Your details have been updated.",
    "ask_feedback": "Your feedback and requests shape this app and the community. What do you want?",
    "feedback_sent": "Thank you, your feedback has been submitted.",
    "no_unread_feedback": "No unread messages.",
    "feedback_item": "<b>{sender}</b> · {date}\n{body}",
    "btn_mark_read": "Mark as read",
    "marked_read": "Message marked as read.",
    "confirm_sign_out": "Are you sure you want to sign out?",
    "signed_out": "You have been signed out.",
    "confirm_delete": (
        "⚠️ <b>Delete account</b>\n\n"
        "This cannot be undone. Enter your password to confirm:"
    ),
    "account_deleted": "Your account has been deleted.",

    # === ERRORS ===
    "error": "⚠️ {message}",
    "error_generic": "⚠️ Something went wrong. Please try again.",
    "sign_in_required": "Please sign in first.",
    "throttled": "You're sending too many requests. Please wait a moment.",
}
