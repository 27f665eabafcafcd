from interview_digest.main import main

main()
