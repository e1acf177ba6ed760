"""Static task content: question, answer template, model answer and learn-more text."""

QUESTION_TEXT = "\n".join([
    "Scenario:",
    "You work in a small team and have been given a basic spreadsheet that tracks tasks and deadlines for staff.",
    "The spreadsheet includes columns for task name, project owner, due date, and traffic-light status (red/amber/green).",
    "Some totals look wrong, and it’s hard to see which tasks are overdue or causing delays.",
    "",
    "You are new to spreadsheets and want to use AI as your thinking assistant to help you:",
    "- check whether the spreadsheet is structured sensibly",
    "- spot patterns or problems",
    "- suggest one simple improvement to make the data easier to understand",
    "",
    "=== TASK ===",
    "Write a prompt that asks AI to help you understand the spreadsheet and improve it.",
    "Your prompt must make clear what the columns contain, what you’re unsure about, and what output you want.",
    "",
    "=== USE THE FEthink STRUCTURE ===",
    "ROLE: Tell AI who you are, or what role you want it to adopt.",
    "TASK: What do you want AI to do?",
    "CONTEXT: Who is AI creating the content for, and what is the spreadsheet used for?",
    "FORMAT: How should AI present the answer (steps, bullet points, simple language) and what should it include?",
    "",
    "Aim for at least 20 words.",
])

TEMPLATE_TEXT = "\n".join([
    "Role:",
    "Task:",
    "Context (audience):",
    "Format (structure/tone):",
])

MODEL_ANSWER = "\n".join([
    "Role:",
    "Act as a patient spreadsheet tutor for beginners who explains things in simple English and avoids technical jargon.",
    "",
    "Task:",
    "Help me understand what is happening in my task-tracking spreadsheet and suggest two simple improvements to make it easier to manage.",
    "Please: briefly explain what the data shows, point out obvious problems or inconsistencies, and suggest one small structural improvement.",
    "",
    "Context (Audience):",
    "I work in a small team and I am new to spreadsheets.",
    "The spreadsheet tracks tasks, project owner, due date, and traffic-light status (red/amber/green).",
    "Some tasks feel overdue, one row looks inconsistent, and I’m not sure the columns are set up in the best way.",
    "I want to use it to keep on top of deadlines and spot problems early.",
    "",
    "Format:",
    "1) A short summary (2–3 sentences) of what the spreadsheet shows",
    "2) Three bullet points highlighting patterns or issues",
    "3) Two simple improvements I can make",
    "4) One practical next step I can do today in Excel or Google Sheets",
    "",
    "Use a friendly, supportive tone suitable for a beginner. Keep it practical.",
])

LEARN_MORE_TEXT = "\n".join([
    "When prompting AI about a spreadsheet, help it ‘see’ the data by describing the columns clearly.",
    "Good prompts ask for: (1) what the data suggests, (2) any inconsistencies, and (3) simple improvements.",
    "",
    "Try including:",
    "- what each column means",
    "- what problem you are trying to solve (e.g., overdue tasks, unclear status)",
    "- the output format you want (steps, bullet points, simple actions)",
    "",
    "If your prompt is vague, AI will reply vaguely. Specific prompts produce useful guidance.",
])

GATED_MESSAGE = (
    "Please add to your answer.\n"
    "This response is too short to demonstrate the full prompt structure.\n"
    "Aim for at least 20 words and include: role, task, context, and format."
)

# Shown to the client by GET /api/config
TARGET_WORDS = "20–300"
MAX_WORDS = 300
