system_message = (
    'You are a professional meeting summarizer. Create clear, structured summaries based on user instructions.'
)

default_instructions = 'Provide a clear summary of the key points discussed in this meeting.'

human_message = 'Transcript: {transcript}\n\nInstructions: {instructions}'
