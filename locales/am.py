"""Amharic phrase table (English -> Amharic) for offline translation."""

AM_PHRASES = {
    # === NAVIGATION ===
    "Welcome": "እንኳን ደህና መጣህ",
    "Login": "ግባ",
    "Logout": "ውጣ",
    "Dashboard": "ዳሽቦርድ",
    "Profile": "መገለጫ",
    "Settings": "ቅንብሮች",
    "Reports": "ሪፖርቶች",
    "History": "ታሪክ",

    # === PEOPLE ===
    "Inmates": "እስረኞች",
    "Staff": "ሰራተኞች",
    "Visitor": "ጎብኚ",
    "Prison": "እስር ቤት",

    # === ACTIONS ===
    "Save": "አስቀምጥ",
    "Cancel": "ይቅር",
    "Delete": "ሰርዝ",
    "Edit": "አስተካክል",
    "Submit": "አስገባ",
    "Search": "ፈልግ",
    "Create": "ፍጠር",
    "Update": "አዘምን",
    "Download": "አውርድ",
    "Backup": "ተተኪ",
    "Restore": "መመለስ",

    # === FORM FIELDS ===
    "Name": "ስም",
    "Email": "ኢሜይል",
    "Password": "የይለፍ ቃል",
    "Phone": "ስልክ",
    "Address": "አድራሻ",
    "Age": "እድሜ",
    "Gender": "ጾታ",
    "Date": "ቀን",
    "Time": "ሰዓት",
    "Schedule": "መርሃግብር",

    # === STATUS ===
    "Status": "ሁኔታ",
    "Active": "ንቁ",
    "Inactive": "ንቁ ያልሆነ",
    "Error": "ስህተት",
    "Success": "ስኬት",
    "Warning": "ማስጠንቀቂያ",
    "Info": "መረጃ",
    "Yes": "አዎ",
    "No": "አይ",

    # === SYSTEM ===
    "System": "ሲስተም",
    "Recovery": "መልሶ ማግኘት",
    "Incremental": "ጭማሪ",
    "Full": "ሙሉ",
}
