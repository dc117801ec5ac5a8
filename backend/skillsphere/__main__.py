from skillsphere.main import main

main()
